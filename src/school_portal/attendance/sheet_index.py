from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from ..sheets.gateway import Grid, TabularRangeFetcher
from ..sheets.model import SheetsConfig
from .model import NotFound, StudentMatch

logger = logging.getLogger(__name__)

SearchResult = Union[StudentMatch, NotFound]


def match_in_grid(sheet_name: str, grid: Grid, roll_number: str) -> Optional[StudentMatch]:
    if not grid:
        return None

    header = grid[0]
    for row in grid[1:]:
        if row and row[0] == roll_number:
            return StudentMatch(sheet_name=sheet_name, header=tuple(header), row=tuple(row))
    return None


class SheetRowIndex:
    """Locate a student's row across class sheets, in priority order."""

    def __init__(self, fetcher: TabularRangeFetcher, config: SheetsConfig):
        self._fetcher = fetcher
        self._config = config

    def find_student(self, roll_number: str, sheet_names: Optional[Sequence[str]] = None) -> SearchResult:
        """Return the first sheet's match, fetching sheets one by one.

        Sheets after the first hit are never fetched. A fetch failure
        (RemoteFetchError) aborts the whole search.
        """
        names = tuple(sheet_names) if sheet_names is not None else self._config.class_sheets

        for sheet_name in names:
            grid = self._fetcher.fetch(self._config.spreadsheet_id, self._config.range_for(sheet_name))
            match = match_in_grid(sheet_name, grid, roll_number)
            if match:
                logger.info("Roll number %s found in sheet %s", roll_number, sheet_name)
                return match

        logger.info("Roll number %s not found in sheets %s", roll_number, list(names))
        return NotFound(roll_number=roll_number, sheets_searched=names)
