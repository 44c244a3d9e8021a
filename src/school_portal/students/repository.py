from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ExamMark, FeeStatus


class StudentRepository(Protocol):
    """Relational store of student records.

    Student rows are returned as plain dicts: the profile table is wide and
    clients consume its columns as-is.
    """

    def get_by_roll_number(self, roll_number: str) -> Optional[dict]:
        raise NotImplementedError

    def get_exam_marks(self, roll_number: str) -> Sequence[ExamMark]:
        raise NotImplementedError

    def get_fee_status(self, roll_number: str) -> Optional[FeeStatus]:
        raise NotImplementedError
