from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class AttendanceEntry:
    date: str
    status: str


@dataclass(frozen=True)
class StudentMatch:
    """A roll number located in a class sheet, with the header it aligns to."""

    sheet_name: str
    header: Tuple[str, ...]
    row: Tuple[str, ...]


@dataclass(frozen=True)
class NotFound:
    roll_number: str
    sheets_searched: Tuple[str, ...]


@dataclass(frozen=True)
class AttendanceRecord:
    sheet_name: str
    roll_number: str
    student_name: str
    section: str
    entries: Tuple[AttendanceEntry, ...]


@dataclass(frozen=True)
class LatestAttendance:
    sheet_name: str
    roll_number: str
    student_name: str
    section: str
    latest_date: str
    latest_status: str


@dataclass(frozen=True)
class AttendanceSummary:
    total_days: int
    days_present: int
    attendance_percentage: str
