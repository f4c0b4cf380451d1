from __future__ import annotations

from typing import Optional

from ..core.constants import STANDING_EXCELLENT, STANDING_GOOD, STANDING_WARNING
from ..core.enums import Standing
from .model import AttendanceCounts


def classify_standing(counts: Optional[AttendanceCounts]) -> Standing:
    """Roster badge from the unrounded present percentage."""
    if counts is None or counts.total == 0:
        return Standing.UNKNOWN

    percentage = counts.present * 100 / counts.total
    if percentage >= STANDING_EXCELLENT:
        return Standing.EXCELLENT
    if percentage >= STANDING_GOOD:
        return Standing.GOOD
    if percentage >= STANDING_WARNING:
        return Standing.WARNING
    return Standing.AT_RISK
