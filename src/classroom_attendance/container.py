from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .analytics.synthetic_provider import SyntheticAnalyticsProvider
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .common.latency import SimulatedLatency
from .core.constants import ATTENDANCE_LATENCY_MS, STUDENT_LATENCY_MS
from .fixtures.loader import load_attendance, load_students
from .students.memory_student_repository import InMemoryStudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    students_repo: InMemoryStudentRepository
    attendance_repo: InMemoryAttendanceRepository

    student_service: StudentService
    attendance_service: AttendanceService


def build_container(
    *,
    students_fixture: Optional[str] = None,
    attendance_fixture: Optional[str] = None,
    latency_scale: float = 0.0,
    clock: Callable[[], datetime] = now_local,
    rng: Optional[random.Random] = None,
) -> Container:
    """Wire fresh stores seeded from fixtures; every call returns new state."""

    students_repo = InMemoryStudentRepository(load_students(students_fixture or None))
    attendance_repo = InMemoryAttendanceRepository(load_attendance(attendance_fixture or None))

    student_service = StudentService(
        students_repo,
        clock=clock,
        latency=SimulatedLatency(STUDENT_LATENCY_MS, scale=latency_scale),
    )
    attendance_service = AttendanceService(
        attendance_repo,
        analytics=SyntheticAnalyticsProvider(rng=rng, clock=clock),
        clock=clock,
        latency=SimulatedLatency(ATTENDANCE_LATENCY_MS, scale=latency_scale),
    )

    return Container(
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        student_service=student_service,
        attendance_service=attendance_service,
    )
