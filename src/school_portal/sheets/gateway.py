from __future__ import annotations

from typing import List, Protocol, Sequence

Grid = List[List[str]]


class TabularRangeFetcher(Protocol):
    """Read access to a spreadsheet range as a row-major grid of strings.

    Row 0 of a fetched range is whatever the sheet holds there (usually the header).
    """

    def fetch(self, spreadsheet_id: str, range_spec: str) -> Grid:
        raise NotImplementedError


class SpreadsheetGateway(TabularRangeFetcher, Protocol):
    def batch_fetch(self, spreadsheet_id: str, ranges: Sequence[str]) -> List[Grid]:
        raise NotImplementedError

    def append_row(self, spreadsheet_id: str, range_spec: str, values: Sequence[object]) -> None:
        raise NotImplementedError
