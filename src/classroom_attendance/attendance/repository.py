from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, on_date: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        """Records in insertion order; callers decide the sort."""

        raise NotImplementedError

    def get_for_student_and_date(self, student_id: int, on_date: str) -> Optional[AttendanceRecord]:
        """First record for (student, date); duplicates are possible."""

        raise NotImplementedError

    def create(self, data: Mapping[str, Any]) -> AttendanceRecord:
        raise NotImplementedError

    def update(self, record_id: int, changes: Mapping[str, Any]) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def delete_by_id(self, record_id: int) -> bool:
        raise NotImplementedError
