from __future__ import annotations

from datetime import datetime

import pytest

from classroom_attendance.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from classroom_attendance.attendance.model import AttendanceRecord
from classroom_attendance.attendance.service import AttendanceService
from classroom_attendance.students.memory_student_repository import InMemoryStudentRepository
from classroom_attendance.students.model import Student
from classroom_attendance.students.service import StudentService


@pytest.fixture
def fixed_now() -> datetime:
    # Monday
    return datetime(2024, 1, 15, 8, 30, 0)


@pytest.fixture
def student_service(fixed_now):
    def build(*students: Student) -> StudentService:
        return StudentService(InMemoryStudentRepository(students), clock=lambda: fixed_now)

    return build


@pytest.fixture
def attendance_service(fixed_now):
    def build(*records: AttendanceRecord, analytics=None) -> AttendanceService:
        return AttendanceService(
            InMemoryAttendanceRepository(records),
            analytics=analytics,
            clock=lambda: fixed_now,
        )

    return build
