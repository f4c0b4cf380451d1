from datetime import date

import pytest

from classroom_attendance.common.datetime_utils import is_weekend, iter_days
from classroom_attendance.common.latency import SimulatedLatency
from classroom_attendance.common.validators import require_json_object, require_status, validate_new_student
from classroom_attendance.core.enums import AttendanceStatus
from classroom_attendance.core.exceptions import ValidationError

VALID = {
    "name": "Ana Cruz",
    "studentId": "STU010",
    "email": "a@x.com",
    "phone": "555",
    "dateOfBirth": "2010-01-01",
}


def test_valid_student_form_passes():
    validate_new_student(VALID)


@pytest.mark.parametrize("field", ["name", "studentId", "email", "phone", "dateOfBirth"])
def test_required_student_fields(field):
    payload = {**VALID, field: "  "}
    with pytest.raises(ValidationError):
        validate_new_student(payload)


@pytest.mark.parametrize("email", ["ana", "ana@x", "a b@x.com"])
def test_email_format(email):
    with pytest.raises(ValidationError):
        validate_new_student({**VALID, "email": email})


def test_require_status():
    assert require_status("excused") == AttendanceStatus.EXCUSED
    with pytest.raises(ValidationError):
        require_status("late")


def test_iter_days_and_weekends():
    days = list(iter_days(date(2024, 1, 5), date(2024, 1, 8)))
    assert [d.day for d in days] == [5, 6, 7, 8]
    assert [is_weekend(d) for d in days] == [False, True, True, False]


def test_iter_days_stops_at_last_representable_date():
    assert list(iter_days(date(9999, 12, 30), date.max)) == [date(9999, 12, 30), date.max]
    assert list(iter_days(date.max, date.max)) == [date.max]


def test_require_json_object():
    assert require_json_object(None) == {}
    assert require_json_object({"name": "x"}) == {"name": "x"}
    for body in ([1, 2], "x", 3):
        with pytest.raises(ValidationError):
            require_json_object(body)


def test_latency_disabled_at_zero_scale():
    slept = []
    SimulatedLatency({"get_all": 300}, scale=0, sleep=slept.append)("get_all")
    assert slept == []


def test_latency_scales_known_operations_only():
    slept = []
    latency = SimulatedLatency({"get_all": 300}, scale=0.5, sleep=slept.append)
    latency("get_all")
    latency("unknown")
    assert slept == [0.15]
