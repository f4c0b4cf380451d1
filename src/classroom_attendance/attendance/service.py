from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Mapping, Optional

from ..analytics.provider import AnalyticsProvider
from ..analytics.synthetic_provider import SyntheticAnalyticsProvider
from ..common.datetime_utils import now_local, parse_iso_date, to_iso_date
from ..common.latency import SimulatedLatency
from ..core.constants import ATTENDANCE_LATENCY_MS
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from .model import AttendanceCounts, AttendanceRecord, ReportMeta
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TodaySummary:
    total: int
    present: int
    absent: int
    tardy: int

    def to_dict(self) -> dict:
        return {"total": self.total, "present": self.present, "absent": self.absent, "tardy": self.tardy}


class AttendanceService:
    """Use cases over the attendance store.

    Calendar, analytics and report listings are delegated to an
    ``AnalyticsProvider`` and do not read the stored records.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        analytics: Optional[AnalyticsProvider] = None,
        clock: Callable[[], datetime] = now_local,
        latency: Optional[SimulatedLatency] = None,
    ):
        self._attendance = attendance
        self._clock = clock
        self._analytics = analytics or SyntheticAnalyticsProvider(clock=clock)
        self._latency = latency or SimulatedLatency(ATTENDANCE_LATENCY_MS)

    def today(self) -> date:
        return self._clock().date()

    def _today(self) -> str:
        return to_iso_date(self.today())

    def get_all(self) -> list[AttendanceRecord]:
        self._latency("get_all")
        return list(self._attendance.list_all())

    def get_by_id(self, record_id: int) -> AttendanceRecord:
        self._latency("get_by_id")
        record = self._attendance.get_by_id(int(record_id))
        if not record:
            logger.warning("Attendance record %s not found", record_id)
            raise NotFoundError("Attendance record", int(record_id))
        return record

    def create(self, data: Mapping[str, Any]) -> AttendanceRecord:
        self._latency("create")
        record = self._attendance.create(data)
        logger.info(
            "Created attendance %s: student=%s date=%s status=%s",
            record.id,
            record.student_id,
            record.date,
            record.status.value,
        )
        return record

    def update(self, record_id: int, changes: Mapping[str, Any]) -> AttendanceRecord:
        self._latency("update")
        record = self._attendance.update(int(record_id), changes)
        if not record:
            logger.warning("Cannot update missing attendance record %s", record_id)
            raise NotFoundError("Attendance record", int(record_id))
        logger.info("Updated attendance %s", record.id)
        return record

    def delete(self, record_id: int) -> bool:
        self._latency("delete")
        if not self._attendance.delete_by_id(int(record_id)):
            logger.warning("Cannot delete missing attendance record %s", record_id)
            raise NotFoundError("Attendance record", int(record_id))
        logger.info("Deleted attendance %s", record_id)
        return True

    def get_today_attendance(self) -> list[AttendanceRecord]:
        self._latency("get_today_attendance")
        return list(self._attendance.list_for_date(self._today()))

    def get_student_attendance(self, student_id: int) -> list[AttendanceRecord]:
        """Most recent date first; equal dates keep insertion order."""
        self._latency("get_student_attendance")
        records = self._attendance.list_for_student(int(student_id))
        return sorted(records, key=lambda r: r.date, reverse=True)

    def find_for_student_and_date(self, student_id: int, on_date: date | str) -> Optional[AttendanceRecord]:
        """Existing record for (student, date), if any.

        The store allows several records for the same pair; callers that
        want one mark per day must check here before creating.
        """
        if isinstance(on_date, date):
            on_date = to_iso_date(on_date)
        return self._attendance.get_for_student_and_date(int(student_id), on_date)

    def get_attendance_stats(self) -> dict[int, AttendanceCounts]:
        self._latency("get_attendance_stats")
        stats: dict[int, AttendanceCounts] = {}
        for record in self._attendance.list_all():
            counts = stats.get(record.student_id) or AttendanceCounts()
            stats[record.student_id] = counts.bump(record.status)
        return stats

    def get_monthly_attendance(self, start: date | str, end: date | str) -> dict[str, AttendanceCounts]:
        self._latency("get_monthly_attendance")
        if isinstance(start, str):
            start = parse_iso_date(start)
        if isinstance(end, str):
            end = parse_iso_date(end)
        return self._analytics.monthly_attendance(start, end)

    def get_analytics(self, time_range: str = "month") -> dict:
        self._latency("get_analytics")
        return self._analytics.analytics(time_range)

    def get_reports(self) -> list[ReportMeta]:
        self._latency("get_reports")
        return self._analytics.reports()

    def search_reports(self, term: str) -> list[ReportMeta]:
        needle = (term or "").strip().lower()
        reports = self.get_reports()
        if not needle:
            return reports
        return [r for r in reports if needle in r.name.lower() or needle in r.type.lower()]

    def mark_attendance(self, student_id: int, status: AttendanceStatus) -> AttendanceRecord:
        """Record today's mark for a student.

        Updates the student's existing record for today when there is one,
        otherwise creates it.
        """
        now = self._clock()
        today = to_iso_date(now.date())
        payload = {
            "student_id": int(student_id),
            "date": today,
            "status": AttendanceStatus(status),
            "check_in_time": now.isoformat(),
        }

        existing = self.find_for_student_and_date(student_id, today)
        if existing:
            return self.update(existing.id, payload)
        return self.create(payload)

    def get_today_summary(self, *, total_students: int) -> TodaySummary:
        records = self.get_today_attendance()
        return TodaySummary(
            total=int(total_students),
            present=sum(1 for r in records if r.status == AttendanceStatus.PRESENT),
            absent=sum(1 for r in records if r.status == AttendanceStatus.ABSENT),
            tardy=sum(1 for r in records if r.status == AttendanceStatus.TARDY),
        )
