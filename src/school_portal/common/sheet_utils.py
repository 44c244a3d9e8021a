from __future__ import annotations

from typing import Sequence


def cell(row: Sequence[str], index: int) -> str:
    """Value at ``index`` or "" when the sheet API trimmed trailing empty cells."""
    if 0 <= index < len(row):
        return row[index]
    return ""
