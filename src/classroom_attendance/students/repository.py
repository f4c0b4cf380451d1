from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Note: the service layer depends on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def create(self, data: Mapping[str, Any], *, enrollment_date: str) -> Student:
        raise NotImplementedError

    def update(self, student_id: int, changes: Mapping[str, Any]) -> Optional[Student]:
        raise NotImplementedError

    def delete_by_id(self, student_id: int) -> bool:
        raise NotImplementedError
