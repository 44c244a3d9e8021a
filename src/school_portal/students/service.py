from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, NotFoundError
from .model import ExamMark
from .repository import StudentRepository

logger = logging.getLogger(__name__)

# Columns never sent back to the client.
_PRIVATE_COLUMNS = frozenset({"password"})


class StudentService:
    """Use case: student login and read-only academic lookups."""

    def __init__(self, students: StudentRepository):
        self._students = students

    @staticmethod
    def _public(student: dict) -> dict:
        return {k: v for k, v in student.items() if k not in _PRIVATE_COLUMNS}

    def authenticate(self, roll_number, password) -> dict:
        """Students sign in with their roll number and the parent contact number on file."""
        roll_number = require_non_empty(roll_number, "rollNumber")
        logger.info("Login attempt for roll number %s", roll_number)

        student = self._students.get_by_roll_number(roll_number)
        if not student:
            raise NotFoundError("Student not found")

        if not password or str(password) != str(student.get("parentContact")):
            raise AuthenticationError("Incorrect password")

        return self._public(student)

    def get_profile(self, roll_number) -> dict:
        roll_number = require_non_empty(roll_number, "rollNumber")
        student = self._students.get_by_roll_number(roll_number)
        if not student:
            raise NotFoundError("Student not found")
        return student

    def get_exam_report(self, roll_number) -> Sequence[ExamMark]:
        roll_number = require_non_empty(roll_number, "rollNumber")
        marks = self._students.get_exam_marks(roll_number)
        logger.debug("Exam report for %s: %d rows", roll_number, len(marks))
        if not marks:
            raise NotFoundError(f"No exam reports found for roll number {roll_number}")
        return marks

    def get_fee_status(self, roll_number) -> Optional[str]:
        roll_number = require_non_empty(roll_number, "rollNumber")
        fee = self._students.get_fee_status(roll_number)
        if fee is None:
            raise NotFoundError(f"No fee status found for roll number {roll_number}")
        return fee.fee_status
