from __future__ import annotations

from datetime import date

import pytest

from classroom_attendance.attendance.model import AttendanceCounts, AttendanceRecord
from classroom_attendance.core.enums import AttendanceStatus
from classroom_attendance.core.exceptions import NotFoundError


def _rec(record_id: int, student_id: int, on: str, status: str = "present") -> AttendanceRecord:
    return AttendanceRecord(id=record_id, student_id=student_id, date=on, status=AttendanceStatus(status))


class FakeAnalytics:
    def __init__(self):
        self.monthly_args = None

    def monthly_attendance(self, start, end):
        self.monthly_args = (start, end)
        return {}

    def analytics(self, time_range):
        return {"range": time_range}

    def reports(self):
        return []


def test_stats_group_counts_per_student(attendance_service):
    svc = attendance_service(
        _rec(1, 7, "2024-01-01"),
        _rec(2, 7, "2024-01-02"),
        _rec(3, 7, "2024-01-03", "absent"),
        _rec(4, 7, "2024-01-04"),
        _rec(5, 8, "2024-01-04", "tardy"),
    )

    stats = svc.get_attendance_stats()

    assert stats[7].to_dict() == {"present": 3, "absent": 1, "tardy": 0, "excused": 0, "total": 4}
    assert stats[8] == AttendanceCounts(tardy=1)
    assert stats[8].total == 1


def test_student_history_is_most_recent_first(attendance_service):
    svc = attendance_service(
        _rec(1, 3, "2024-01-01"),
        _rec(2, 3, "2024-01-15"),
        _rec(3, 4, "2024-01-20"),
        _rec(4, 3, "2024-01-08"),
    )

    history = svc.get_student_attendance(3)

    assert [r.date for r in history] == ["2024-01-15", "2024-01-08", "2024-01-01"]


def test_student_history_keeps_insertion_order_for_same_date(attendance_service):
    svc = attendance_service(_rec(1, 3, "2024-01-01"), _rec(2, 3, "2024-01-01", "absent"))
    assert [r.id for r in svc.get_student_attendance(3)] == [1, 2]


def test_today_attendance_uses_clock_date(attendance_service, fixed_now):
    svc = attendance_service(_rec(1, 1, "2024-01-14"), _rec(2, 2, "2024-01-15"), _rec(3, 3, "2024-01-15"))
    assert [r.id for r in svc.get_today_attendance()] == [2, 3]


def test_create_assigns_next_id(attendance_service):
    svc = attendance_service(_rec(4, 1, "2024-01-01"), _rec(9, 1, "2024-01-02"))

    created = svc.create({"studentId": 2, "date": "2024-01-03", "status": "tardy", "note": "bus"})

    assert created.id == 10
    assert created.status == AttendanceStatus.TARDY
    assert created.note == "bus"


def test_create_ignores_id_in_either_spelling(attendance_service):
    svc = attendance_service(_rec(1, 1, "2024-01-01"), _rec(2, 1, "2024-01-02"))

    created = svc.create({"id": 0, "Id": 1, "studentId": 2, "date": "2024-01-03"})

    assert created.id == 3
    assert [r.id for r in svc.get_all()] == [1, 2, 3]
    assert svc.get_by_id(1).student_id == 1


def test_create_does_not_validate_student_reference(attendance_service):
    svc = attendance_service()
    assert svc.create({"studentId": 999, "date": "2024-01-03", "status": "present"}).student_id == 999


@pytest.mark.parametrize("op", ["get_by_id", "update", "delete"])
def test_missing_record_raises_not_found(attendance_service, op):
    svc = attendance_service(_rec(1, 1, "2024-01-01"))

    with pytest.raises(NotFoundError):
        if op == "update":
            svc.update(5, {"status": "absent"})
        else:
            getattr(svc, op)(5)


def test_update_merges_and_delete_removes(attendance_service):
    svc = attendance_service(_rec(1, 1, "2024-01-01"))
    svc.update(1, {"note": "late bus"})

    updated = svc.update(1, {"status": "tardy"})
    assert updated.note == "late bus"
    assert updated.status == AttendanceStatus.TARDY
    assert updated.date == "2024-01-01"

    svc.delete(1)
    assert svc.get_all() == []
    with pytest.raises(NotFoundError):
        svc.get_by_id(1)


def test_duplicates_for_same_student_and_date_are_allowed(attendance_service):
    svc = attendance_service(_rec(1, 1, "2024-01-15"))

    svc.create({"studentId": 1, "date": "2024-01-15", "status": "absent"})

    assert len(svc.get_today_attendance()) == 2
    assert svc.find_for_student_and_date(1, date(2024, 1, 15)).id == 1
    assert svc.find_for_student_and_date(1, "2024-01-16") is None


def test_mark_attendance_creates_then_updates_today(attendance_service, fixed_now):
    svc = attendance_service(_rec(1, 2, "2024-01-12"))

    first = svc.mark_attendance(2, AttendanceStatus.PRESENT)
    second = svc.mark_attendance(2, "tardy")

    assert first.id == second.id == 2
    assert second.status == AttendanceStatus.TARDY
    assert second.date == "2024-01-15"
    assert second.check_in_time == fixed_now.isoformat()
    assert len(svc.get_today_attendance()) == 1


def test_today_summary_counts_statuses(attendance_service):
    svc = attendance_service(
        _rec(1, 1, "2024-01-15"),
        _rec(2, 2, "2024-01-15", "absent"),
        _rec(3, 3, "2024-01-15", "tardy"),
        _rec(4, 4, "2024-01-15", "excused"),
        _rec(5, 5, "2024-01-14"),
    )

    summary = svc.get_today_summary(total_students=30)

    assert summary.to_dict() == {"total": 30, "present": 1, "absent": 1, "tardy": 1}


def test_monthly_delegates_to_provider_with_parsed_dates(attendance_service):
    provider = FakeAnalytics()
    svc = attendance_service(analytics=provider)

    svc.get_monthly_attendance("2024-02-01", "2024-02-29")

    assert provider.monthly_args == (date(2024, 2, 1), date(2024, 2, 29))
    assert svc.get_analytics("week") == {"range": "week"}


def test_search_reports_filters_name_and_type(attendance_service):
    svc = attendance_service()

    assert [r.name for r in svc.search_reports("alert")] == ["At-Risk Students Alert"]
    assert [r.id for r in svc.search_reports("monthly")] == [2]
    assert len(svc.search_reports("")) == 3
