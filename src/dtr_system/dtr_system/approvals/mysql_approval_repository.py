from __future__ import annotations

from datetime import date
from typing import List, Sequence

from ..core.enums import ExceptionKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import coerce_flag, db_cursor, fetchall, fetchone, first_present, normalize_mysql_date
from .model import ExceptionRecord, Holiday
from .repository import ApprovalRepository

# kind -> (query, date column, status column)
_EXCEPTION_QUERIES = {
    ExceptionKind.TRAVEL: (
        """
        SELECT etd.emp_objid, etd.travel_objid AS source_id,
               DATE(etd.traveldate) AS traveldate, et.travelstatus
        FROM employee_travels_dates etd
        INNER JOIN employee_travels et ON et.objid = etd.travel_objid
        WHERE etd.emp_objid=%s
          AND UPPER(COALESCE(et.travelstatus, ''))='APPROVED'
          AND DATE(etd.traveldate) BETWEEN %s AND %s
        """,
        "traveldate",
        "travelstatus",
    ),
    ExceptionKind.CDO: (
        """
        SELECT c.emp_objid, DATE(u.cdodate) AS cdodate,
               COALESCE(u.cdodatestatus, c.cdostatus, '') AS cdostatus
        FROM employee_cdo_usedates u
        INNER JOIN employee_cdo c ON c.id = u.cdo_id
        WHERE c.emp_objid=%s
          AND UPPER(COALESCE(u.cdodatestatus, c.cdostatus, ''))='APPROVED'
          AND DATE(u.cdodate) BETWEEN %s AND %s
        """,
        "cdodate",
        "cdostatus",
    ),
    ExceptionKind.FIX_LOG: (
        """
        SELECT emp_objid, DATE(checktimedate) AS checktimedate, fixstatus
        FROM employee_fixchecktimes
        WHERE emp_objid=%s
          AND UPPER(COALESCE(fixstatus, ''))='APPROVED'
          AND DATE(checktimedate) BETWEEN %s AND %s
        """,
        "checktimedate",
        "fixstatus",
    ),
    ExceptionKind.LOCATOR: (
        """
        SELECT emp_objid, DATE(locatordate) AS locatordate, locstatus
        FROM employee_locators
        WHERE emp_objid=%s
          AND UPPER(COALESCE(locstatus, ''))='APPROVED'
          AND DATE(locatordate) BETWEEN %s AND %s
        """,
        "locatordate",
        "locstatus",
    ),
}


class MySQLApprovalRepository(ApprovalRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_exceptions(self, *, employee_id: str, start: date, end: date) -> Sequence[ExceptionRecord]:
        out: List[ExceptionRecord] = []
        with db_cursor(self._conn_factory) as (_, cur):
            for kind, (query, date_col, status_col) in _EXCEPTION_QUERIES.items():
                cur.execute(query, (employee_id, start, end))
                for r in fetchall(cur):
                    out.append(
                        ExceptionRecord(
                            kind=kind,
                            employee_id=str(r.get("emp_objid") or employee_id),
                            record_date=normalize_mysql_date(r.get(date_col)),
                            status=r.get(status_col),
                            source_id=r.get("source_id"),
                        )
                    )
        return out

    def list_holidays(self, *, start: date, end: date) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT *
                FROM holidays
                WHERE status=1
                  AND ((isrecurring=1) OR (isrecurring=0 AND DATE(holidaydate) BETWEEN %s AND %s))
                """,
                (start, end),
            )
            return [
                Holiday(
                    name=str(first_present(r, "holidayname", "HOLIDAYNAME", "name") or ""),
                    holiday_date=normalize_mysql_date(
                        first_present(r, "HOLIDAYDATE", "holidaydate", "holiday_date", "HolidayDate", "date")
                    ),
                    is_recurring=coerce_flag(
                        first_present(r, "ISRECURRING", "isRecurring", "is_recurring", "isrecurring", "recurring", "IS_RECURRING")
                    ),
                    is_active=True,
                )
                for r in fetchall(cur)
            ]

    def count_leaves(self, *, employee_id: str, start: date, end: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(DISTINCT elt.objid) AS count
                FROM employee_leave_trans elt
                INNER JOIN employee_leave_trans_details eltd ON elt.objid = eltd.leave_objid
                WHERE elt.emp_objid=%s
                  AND UPPER(COALESCE(elt.leavestatus, ''))='APPROVED'
                  AND DATE(eltd.leavedate) BETWEEN %s AND %s
                """,
                (employee_id, start, end),
            )
            r = fetchone(cur)
            return int(r["count"]) if r and r.get("count") is not None else 0
