from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence

from ..common.memory_base import InMemoryTable, index_of, next_id
from .model import Student
from .repository import StudentRepository


class InMemoryStudentRepository(StudentRepository):
    def __init__(self, seed: Iterable[Student] = ()):
        self._table: InMemoryTable[Student] = InMemoryTable(seed)

    def list_all(self) -> Sequence[Student]:
        with self._table.locked() as rows:
            return list(rows)

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with self._table.locked() as rows:
            i = index_of(rows, student_id)
            return rows[i] if i >= 0 else None

    def create(self, data: Mapping[str, Any], *, enrollment_date: str) -> Student:
        with self._table.locked() as rows:
            student = Student.new(next_id(rows), data, enrollment_date=enrollment_date)
            rows.append(student)
            return student

    def update(self, student_id: int, changes: Mapping[str, Any]) -> Optional[Student]:
        with self._table.locked() as rows:
            i = index_of(rows, student_id)
            if i < 0:
                return None
            rows[i] = rows[i].merged(changes)
            return rows[i]

    def delete_by_id(self, student_id: int) -> bool:
        with self._table.locked() as rows:
            i = index_of(rows, student_id)
            if i < 0:
                return False
            del rows[i]
            return True
