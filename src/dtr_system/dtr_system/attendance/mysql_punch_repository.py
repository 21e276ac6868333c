from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, first_present
from .model import ClockPunch
from .repository import PunchRepository


class MySQLPunchRepository(PunchRepository):
    """Raw punches from the biometric ``CHECKINOUT`` table."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_range(self, *, dtr_user_id: str, start: date, end: date) -> Sequence[ClockPunch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT USERID, CHECKTIME
                FROM CHECKINOUT
                WHERE USERID=%s AND DATE(CHECKTIME) BETWEEN %s AND %s
                ORDER BY CHECKTIME
                """,
                (dtr_user_id, start, end),
            )
            return [
                ClockPunch(
                    employee_id=str(first_present(r, "USERID", "userid") or dtr_user_id),
                    timestamp=first_present(r, "CHECKTIME", "checktime", "CheckTime", "DATE", "date"),
                )
                for r in fetchall(cur)
            ]
