from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance mark for one student."""

    PRESENT = "present"
    ABSENT = "absent"
    TARDY = "tardy"
    EXCUSED = "excused"


class Standing(str, Enum):
    """Roster badge derived from a student's present rate."""

    EXCELLENT = "excellent"
    GOOD = "good"
    WARNING = "warning"
    AT_RISK = "at-risk"
    UNKNOWN = "unknown"
