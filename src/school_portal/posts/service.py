from __future__ import annotations

from typing import List

from ..common.sheet_utils import cell
from ..core.constants import POSTS_RANGE
from ..sheets.gateway import TabularRangeFetcher
from .model import Post


class PostService:
    """Notice-board posts kept in a spreadsheet, one post per row (title, description, timestamp)."""

    def __init__(self, sheets: TabularRangeFetcher, spreadsheet_id: str):
        self._sheets = sheets
        self._spreadsheet_id = spreadsheet_id

    def list_posts(self) -> List[Post]:
        rows = self._sheets.fetch(self._spreadsheet_id, POSTS_RANGE)
        return [Post(title=cell(r, 0), description=cell(r, 1), timestamp=cell(r, 2)) for r in rows]
