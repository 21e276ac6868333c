from __future__ import annotations

from typing import Sequence

from ..core.enums import ShiftTimeMode
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import ShiftType
from .repository import ShiftRepository

_SHIFT_COLUMNS = """
    s.id AS shift_id, s.shiftname, s.shifttimemode,
    s.shift_checkin, s.shift_checkin_start, s.shift_checkin_end,
    s.shift_checkout, s.shift_checkout_start, s.shift_checkout_end,
    s.credits
"""


def _row_to_shift(r: dict) -> ShiftType:
    return ShiftType(
        shift_id=int(r["shift_id"]),
        shift_name=r.get("shiftname") or "",
        time_mode=ShiftTimeMode.parse(r.get("shifttimemode")),
        checkin=normalize_mysql_time(r.get("shift_checkin")),
        checkin_start=normalize_mysql_time(r.get("shift_checkin_start")),
        checkin_end=normalize_mysql_time(r.get("shift_checkin_end")),
        checkout=normalize_mysql_time(r.get("shift_checkout")),
        checkout_start=normalize_mysql_time(r.get("shift_checkout_start")),
        checkout_end=normalize_mysql_time(r.get("shift_checkout_end")),
        credits=float(r["credits"]) if r.get("credits") is not None else None,
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_assigned(self, employee_id: str) -> Sequence[ShiftType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SHIFT_COLUMNS}
                FROM employee_assignedshifts a
                JOIN shiftscheduletypes s ON s.id = a.shiftid
                WHERE a.emp_objid=%s AND a.is_used=1
                ORDER BY a.createddate DESC
                """,
                (employee_id,),
            )
            return [_row_to_shift(r) for r in fetchall(cur)]
