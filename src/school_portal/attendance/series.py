from __future__ import annotations

from typing import List, Sequence

from ..common.sheet_utils import cell
from ..core.constants import METADATA_COLUMNS
from .model import AttendanceEntry


def build_series(header: Sequence[str], row: Sequence[str]) -> List[AttendanceEntry]:
    """Pair each dated header column with the student's mark in that column.

    Columns before METADATA_COLUMNS hold roll number, name and section and are skipped.
    """
    return [
        AttendanceEntry(date=header[i], status=cell(row, i))
        for i in range(METADATA_COLUMNS, len(header))
    ]
