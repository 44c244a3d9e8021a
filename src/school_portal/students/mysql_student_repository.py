from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import fetchall, fetchone, read_cursor
from .model import ExamMark, FeeStatus
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_roll_number(self, roll_number: str) -> Optional[dict]:
        with read_cursor(self._conn_factory) as cur:
            cur.execute("SELECT * FROM `Student-info` WHERE rollNumber=%s", (roll_number,))
            return fetchone(cur)

    def get_exam_marks(self, roll_number: str) -> Sequence[ExamMark]:
        with read_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT
                    si.rollNumber, si.firstName, si.lastName,
                    sm.subject, sm.marks, sm.grade, sm.typeofexam
                FROM `Student-info` si
                JOIN `Student_Marks` sm ON si.rollNumber = sm.rollNumber
                WHERE si.rollNumber=%s
                """,
                (roll_number,),
            )
            rows = fetchall(cur)
            return [
                ExamMark(
                    roll_number=str(r["rollNumber"]),
                    first_name=r.get("firstName"),
                    last_name=r.get("lastName"),
                    subject=r["subject"],
                    marks=r.get("marks"),
                    grade=r.get("grade"),
                    type_of_exam=r.get("typeofexam"),
                )
                for r in rows
            ]

    def get_fee_status(self, roll_number: str) -> Optional[FeeStatus]:
        with read_cursor(self._conn_factory) as cur:
            cur.execute("SELECT rollNumber, feeStatus FROM `Student-info` WHERE rollNumber=%s", (roll_number,))
            r = fetchone(cur)
            if not r:
                return None
            return FeeStatus(roll_number=str(r["rollNumber"]), fee_status=r.get("feeStatus"))
