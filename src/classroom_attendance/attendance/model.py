from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping, Optional

from ..common.records import field_aliases, pick_fields
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark for a student on a date.

    ``student_id`` references ``Student.id`` but is never checked against the
    roster, and nothing stops two records sharing (student_id, date).
    """

    id: int
    student_id: int = 0
    date: str = ""
    status: AttendanceStatus = AttendanceStatus.PRESENT
    check_in_time: Optional[str] = None
    note: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.status, AttendanceStatus):
            object.__setattr__(self, "status", AttendanceStatus(self.status))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(**pick_fields(data, ATTENDANCE_ALIASES))

    @classmethod
    def new(cls, record_id: int, data: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(id=record_id, **pick_fields(data, ATTENDANCE_ALIASES, exclude=frozenset({"id"})))

    def merged(self, changes: Mapping[str, Any]) -> "AttendanceRecord":
        return replace(self, **pick_fields(changes, ATTENDANCE_ALIASES, exclude=frozenset({"id"})))

    def to_dict(self) -> dict:
        out = {_CAMEL.get(k, k): v for k, v in asdict(self).items()}
        out["status"] = self.status.value
        return out


_CAMEL = {
    "id": "Id",
    "student_id": "studentId",
    "check_in_time": "checkInTime",
}

ATTENDANCE_ALIASES = field_aliases(AttendanceRecord, _CAMEL)


@dataclass(frozen=True)
class AttendanceCounts:
    """Status tally for one student or one calendar day."""

    present: int = 0
    absent: int = 0
    tardy: int = 0
    excused: int = 0

    @property
    def total(self) -> int:
        return self.present + self.absent + self.tardy + self.excused

    @property
    def rate(self) -> int:
        """Present share of ``total`` as a rounded percentage (0 when empty)."""
        if self.total == 0:
            return 0
        return int(self.present * 100 / self.total + 0.5)

    def bump(self, status: AttendanceStatus) -> "AttendanceCounts":
        key = AttendanceStatus(status).value
        return replace(self, **{key: getattr(self, key) + 1})

    def to_dict(self) -> dict:
        return {
            "present": self.present,
            "absent": self.absent,
            "tardy": self.tardy,
            "excused": self.excused,
            "total": self.total,
        }


@dataclass(frozen=True)
class ReportMeta:
    """Listing entry for a previously generated report."""

    id: int
    name: str
    type: str
    created_at: str
    file_size: str

    def to_dict(self) -> dict:
        return {
            "Id": self.id,
            "name": self.name,
            "type": self.type,
            "createdAt": self.created_at,
            "fileSize": self.file_size,
        }
