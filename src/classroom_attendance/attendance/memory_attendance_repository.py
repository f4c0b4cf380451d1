from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence

from ..common.memory_base import InMemoryTable, index_of, next_id
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, seed: Iterable[AttendanceRecord] = ()):
        self._table: InMemoryTable[AttendanceRecord] = InMemoryTable(seed)

    def list_all(self) -> Sequence[AttendanceRecord]:
        with self._table.locked() as rows:
            return list(rows)

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        with self._table.locked() as rows:
            i = index_of(rows, record_id)
            return rows[i] if i >= 0 else None

    def list_for_date(self, on_date: str) -> Sequence[AttendanceRecord]:
        with self._table.locked() as rows:
            return [r for r in rows if r.date == on_date]

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        with self._table.locked() as rows:
            return [r for r in rows if r.student_id == student_id]

    def get_for_student_and_date(self, student_id: int, on_date: str) -> Optional[AttendanceRecord]:
        with self._table.locked() as rows:
            return next((r for r in rows if r.student_id == student_id and r.date == on_date), None)

    def create(self, data: Mapping[str, Any]) -> AttendanceRecord:
        with self._table.locked() as rows:
            record = AttendanceRecord.new(next_id(rows), data)
            rows.append(record)
            return record

    def update(self, record_id: int, changes: Mapping[str, Any]) -> Optional[AttendanceRecord]:
        with self._table.locked() as rows:
            i = index_of(rows, record_id)
            if i < 0:
                return None
            rows[i] = rows[i].merged(changes)
            return rows[i]

    def delete_by_id(self, record_id: int) -> bool:
        with self._table.locked() as rows:
            i = index_of(rows, record_id)
            if i < 0:
                return False
            del rows[i]
            return True
