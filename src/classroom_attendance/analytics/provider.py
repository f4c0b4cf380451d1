from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from ..attendance.model import AttendanceCounts, ReportMeta


class AnalyticsProvider(ABC):
    """Provider interface for calendar, analytics and report listings.

    Implementations may compute from real data or synthesise it; callers only
    rely on the shapes returned here.
    """

    @abstractmethod
    def monthly_attendance(self, start: date, end: date) -> dict[str, AttendanceCounts]:
        raise NotImplementedError

    @abstractmethod
    def analytics(self, time_range: str) -> dict:
        raise NotImplementedError

    @abstractmethod
    def reports(self) -> list[ReportMeta]:
        raise NotImplementedError
