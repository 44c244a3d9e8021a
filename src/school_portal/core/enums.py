from __future__ import annotations

from enum import Enum


class AttendanceMark(str, Enum):
    """Status strings teachers type into the class sheets.

    Comparison is exact: "present" in lowercase is not a presence mark.
    """

    PRESENT = "Present"
    ABSENT = "Absent"
