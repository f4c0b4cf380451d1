from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import now_local
from ..common.latency import SimulatedLatency
from ..core.constants import STUDENT_LATENCY_MS
from ..core.exceptions import NotFoundError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: manage the class roster.

    No field validation happens here; roster forms validate before calling
    ``create`` (see ``common.validators``).
    """

    def __init__(
        self,
        students: StudentRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        latency: Optional[SimulatedLatency] = None,
    ):
        self._students = students
        self._clock = clock
        self._latency = latency or SimulatedLatency(STUDENT_LATENCY_MS)

    def get_all(self) -> list[Student]:
        self._latency("get_all")
        return list(self._students.list_all())

    def get_by_id(self, student_id: int) -> Student:
        self._latency("get_by_id")
        student = self._students.get_by_id(int(student_id))
        if not student:
            logger.warning("Student %s not found", student_id)
            raise NotFoundError("Student", int(student_id))
        return student

    def create(self, data: Mapping[str, Any]) -> Student:
        self._latency("create")
        student = self._students.create(data, enrollment_date=self._clock().isoformat())
        logger.info("Created student %s (%s)", student.id, student.student_id)
        return student

    def update(self, student_id: int, changes: Mapping[str, Any]) -> Student:
        self._latency("update")
        student = self._students.update(int(student_id), changes)
        if not student:
            logger.warning("Cannot update missing student %s", student_id)
            raise NotFoundError("Student", int(student_id))
        logger.info("Updated student %s", student.id)
        return student

    def delete(self, student_id: int) -> bool:
        self._latency("delete")
        if not self._students.delete_by_id(int(student_id)):
            logger.warning("Cannot delete missing student %s", student_id)
            raise NotFoundError("Student", int(student_id))
        logger.info("Deleted student %s", student_id)
        return True

    def search(self, term: str) -> list[Student]:
        """Case-insensitive match on name, display code or email."""
        needle = (term or "").strip().lower()
        students = self.get_all()
        if not needle:
            return students
        return [
            s
            for s in students
            if any(needle in (value or "").lower() for value in (s.name, s.student_id, s.email))
        ]
