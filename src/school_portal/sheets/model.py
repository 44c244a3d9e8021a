from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.constants import DEFAULT_ATTENDANCE_RANGE, DEFAULT_CLASS_SHEETS


@dataclass(frozen=True)
class SheetsConfig:
    """Where class attendance lives: one spreadsheet, one tab per class.

    ``class_sheets`` is searched in order; the first tab holding a roll number owns it.
    """

    spreadsheet_id: str
    class_sheets: Tuple[str, ...] = DEFAULT_CLASS_SHEETS
    attendance_range: str = DEFAULT_ATTENDANCE_RANGE

    def range_for(self, sheet_name: str) -> str:
        return f"{sheet_name}!{self.attendance_range}"
