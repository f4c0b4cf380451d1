from __future__ import annotations

import re
from typing import Any, Mapping

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_email(value: Any, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(value):
        raise ValidationError(f"Please enter a valid {field_name.lower()}")
    return value


def require_status(value: Any) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown attendance status: {value!r}")


def validate_new_student(payload: Mapping[str, Any]) -> None:
    """Form rules applied before a student reaches the store.

    The store itself accepts anything; the roster form requires name, display
    code, a well-formed email, phone and date of birth.
    """

    require_non_empty(payload.get("name"), "Name")
    require_non_empty(payload.get("studentId", payload.get("student_id")), "Student ID")
    require_email(payload.get("email"), "Email address")
    require_non_empty(payload.get("phone"), "Phone number")
    require_non_empty(payload.get("dateOfBirth", payload.get("date_of_birth")), "Date of birth")


def require_json_object(data: Any) -> dict:
    """Request body as a mapping; a missing body counts as empty."""

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return dict(data)
