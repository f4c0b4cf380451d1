from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping, Optional

from ..common.records import field_aliases, pick_fields


@dataclass(frozen=True)
class Student:
    """Domain entity: a student on the class roster.

    Note: instances are immutable, so every record handed out by the store is
    already a snapshot.
    """

    id: int
    name: str = ""
    student_id: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    date_of_birth: str = ""
    enrollment_date: str = ""
    parent_name: Optional[str] = None
    parent_phone: Optional[str] = None
    parent_email: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Student":
        return cls(**pick_fields(data, STUDENT_ALIASES))

    @classmethod
    def new(cls, record_id: int, data: Mapping[str, Any], *, enrollment_date: str) -> "Student":
        """Build a record whose id and enrollment stamp always come from the store."""
        kwargs = pick_fields(data, STUDENT_ALIASES, exclude=frozenset({"id", "enrollment_date"}))
        return cls(id=record_id, enrollment_date=enrollment_date, **kwargs)

    def merged(self, changes: Mapping[str, Any]) -> "Student":
        """Shallow merge: supplied fields overwrite, ``id`` never changes."""
        return replace(self, **pick_fields(changes, STUDENT_ALIASES, exclude=frozenset({"id"})))

    def to_dict(self) -> dict:
        return {_CAMEL.get(k, k): v for k, v in asdict(self).items()}


_CAMEL = {
    "id": "Id",
    "student_id": "studentId",
    "date_of_birth": "dateOfBirth",
    "enrollment_date": "enrollmentDate",
    "parent_name": "parentName",
    "parent_phone": "parentPhone",
    "parent_email": "parentEmail",
}

STUDENT_ALIASES = field_aliases(Student, _CAMEL)
