from __future__ import annotations

import logging

from ..common.formatting import format_fixed
from ..common.sheet_utils import cell
from ..common.validators import require_non_empty
from ..core.enums import AttendanceMark
from ..core.exceptions import NotFoundError
from ..sheets.model import SheetsConfig
from .model import AttendanceRecord, AttendanceSummary, LatestAttendance, NotFound, StudentMatch
from .series import build_series
from .sheet_index import SheetRowIndex

logger = logging.getLogger(__name__)


class AttendanceAggregator:
    """Use case: answer attendance queries for one roll number.

    Every call re-reads the class sheets; nothing is cached between requests.
    """

    def __init__(self, index: SheetRowIndex, config: SheetsConfig):
        self._index = index
        self._config = config

    def _locate(self, roll_number) -> StudentMatch:
        roll_number = require_non_empty(roll_number, "rollNumber")

        result = self._index.find_student(roll_number, self._config.class_sheets)
        if isinstance(result, NotFound):
            raise NotFoundError("Student not found in any class sheet.")
        return result

    def get_full_attendance(self, roll_number) -> AttendanceRecord:
        match = self._locate(roll_number)
        return AttendanceRecord(
            sheet_name=match.sheet_name,
            roll_number=cell(match.row, 0),
            student_name=cell(match.row, 1),
            section=cell(match.row, 3),
            entries=tuple(build_series(match.header, match.row)),
        )

    def get_latest_attendance(self, roll_number) -> LatestAttendance:
        """Read the last header column as "latest".

        The last column is taken as-is: a sheet with no date columns reports
        a metadata column here.
        """
        match = self._locate(roll_number)
        last = len(match.header) - 1
        return LatestAttendance(
            sheet_name=match.sheet_name,
            roll_number=cell(match.row, 0),
            student_name=cell(match.row, 1),
            section=cell(match.row, 3),
            latest_date=cell(match.header, last),
            latest_status=cell(match.row, last),
        )

    def get_attendance_tracker(self, roll_number) -> AttendanceSummary:
        match = self._locate(roll_number)
        entries = build_series(match.header, match.row)

        total_days = len(entries)
        days_present = sum(1 for e in entries if e.status == AttendanceMark.PRESENT.value)

        if total_days == 0:
            logger.warning("Sheet %s has no attendance columns; percentage is undefined", match.sheet_name)
            percentage = float("nan")
        else:
            percentage = days_present / total_days * 100

        return AttendanceSummary(
            total_days=total_days,
            days_present=days_present,
            attendance_percentage=format_fixed(percentage, 2),
        )
