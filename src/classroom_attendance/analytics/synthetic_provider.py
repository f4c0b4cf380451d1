from __future__ import annotations

import random
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from ..attendance.model import AttendanceCounts, ReportMeta
from ..common.datetime_utils import is_weekend, iter_days, now_local, to_iso_date
from .provider import AnalyticsProvider


class SyntheticAnalyticsProvider(AnalyticsProvider):
    """Plausible stand-in data; nothing here reads the attendance records.

    Monthly figures come from ``rng`` on every call; analytics and report
    listings are fixed apart from timestamps relative to ``clock``.
    """

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._rng = rng or random.Random()
        self._clock = clock

    def monthly_attendance(self, start: date, end: date) -> dict[str, AttendanceCounts]:
        out: dict[str, AttendanceCounts] = {}
        for day in iter_days(start, end):
            if is_weekend(day):
                continue
            out[to_iso_date(day)] = self._random_day()
        return out

    def _random_day(self) -> AttendanceCounts:
        total = 25 + self._rng.randrange(5)
        present = int(total * (0.8 + self._rng.random() * 0.15))
        absent = int((total - present) * 0.6)
        tardy = int((total - present - absent) * 0.7)
        excused = total - present - absent - tardy
        return AttendanceCounts(present=present, absent=absent, tardy=tardy, excused=excused)

    def analytics(self, time_range: str) -> dict:
        return {
            "overview": {
                "averageAttendance": 87,
                "atRiskStudents": 3,
                "perfectAttendance": 8,
                "chronicAbsence": 1,
            },
            # present, absent, tardy, excused
            "distribution": {"values": [420, 45, 32, 18]},
            "trends": {
                "labels": ["Week 1", "Week 2", "Week 3", "Week 4"],
                "values": [85, 87, 89, 87],
            },
            "studentPerformance": [
                {
                    "id": 1,
                    "name": "Emma Wilson",
                    "attendanceRate": 65,
                    "presentDays": 13,
                    "absentDays": 7,
                    "status": "at-risk",
                },
                {
                    "id": 2,
                    "name": "James Johnson",
                    "attendanceRate": 78,
                    "presentDays": 16,
                    "absentDays": 4,
                    "status": "warning",
                },
                {
                    "id": 3,
                    "name": "Sarah Davis",
                    "attendanceRate": 72,
                    "presentDays": 14,
                    "absentDays": 6,
                    "status": "warning",
                },
            ],
        }

    def reports(self) -> list[ReportMeta]:
        now = self._clock()
        return [
            ReportMeta(
                id=1,
                name="Weekly Attendance Summary",
                type="Weekly Report",
                created_at=(now - timedelta(days=2)).isoformat(),
                file_size="2.4 MB",
            ),
            ReportMeta(
                id=2,
                name="Monthly Analysis - November",
                type="Monthly Report",
                created_at=(now - timedelta(days=7)).isoformat(),
                file_size="5.1 MB",
            ),
            ReportMeta(
                id=3,
                name="At-Risk Students Alert",
                type="Alert Report",
                created_at=(now - timedelta(days=14)).isoformat(),
                file_size="1.2 MB",
            ),
        ]
