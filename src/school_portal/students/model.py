from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ExamMark:
    """One subject result joined with the student's name (report read-model)."""

    roll_number: str
    first_name: Optional[str]
    last_name: Optional[str]
    subject: str
    marks: Any
    grade: Optional[str]
    type_of_exam: Optional[str]


@dataclass(frozen=True)
class FeeStatus:
    roll_number: str
    fee_status: Optional[str]
