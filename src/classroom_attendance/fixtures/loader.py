from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from ..attendance.model import AttendanceRecord
from ..students.model import Student

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_STUDENTS_PATH = DATA_DIR / "students.json"
DEFAULT_ATTENDANCE_PATH = DATA_DIR / "attendance.json"


def _read_rows(path: str | Path) -> list[dict[str, Any]]:
    path = Path(path)
    rows = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(rows, list):
        raise ValueError(f"Fixture {path} must hold a JSON list, got {type(rows).__name__}")
    return rows


def load_students(path: Optional[str | Path] = None) -> list[Student]:
    return [Student.from_dict(row) for row in _read_rows(path or DEFAULT_STUDENTS_PATH)]


def load_attendance(path: Optional[str | Path] = None) -> list[AttendanceRecord]:
    return [AttendanceRecord.from_dict(row) for row in _read_rows(path or DEFAULT_ATTENDANCE_PATH)]
