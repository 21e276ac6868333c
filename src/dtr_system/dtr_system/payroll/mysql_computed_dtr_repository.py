from __future__ import annotations

from typing import Sequence, Tuple

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import ComputedDtr
from .repository import ComputedDtrRepository


class MySQLComputedDtrRepository(ComputedDtrRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, record: ComputedDtr) -> int:
        # One cursor scope: header and details commit or roll back together.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employee_computeddtr(
                    emp_objid, batchid, computedmonth, computedyear, period,
                    total_lates, total_days, total_netdays,
                    total_cdo, total_travels, total_leaves, total_fixtimes,
                    createdby, createddate, computeremarks, computestatus
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,NOW(),%s,%s)
                """,
                (
                    record.employee_id,
                    record.batch_id,
                    record.computed_month,
                    int(record.computed_year),
                    record.period,
                    int(record.total_lates),
                    float(record.total_days),
                    float(record.total_net_days),
                    int(record.total_cdo),
                    int(record.total_travels),
                    int(record.total_leaves),
                    int(record.total_fix_times),
                    record.created_by,
                    record.remarks,
                    record.status,
                ),
            )
            compute_id = int(cur.lastrowid)

            if record.details:
                cur.executemany(
                    """
                    INSERT INTO employee_computeddtr_details(
                        computeid, dtruserid, dtrdate,
                        am_checkin, am_checkout, pm_checkin, pm_checkout,
                        ot_checkin, ot_checkout,
                        hascdo, hasleave, hastravel, haslocator, hasfixlogs
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,NULL,NULL,%s,%s,%s,%s,%s)
                    """,
                    [
                        (
                            compute_id,
                            d.dtr_user_id,
                            d.dtr_date,
                            d.am_checkin,
                            d.am_checkout,
                            d.pm_checkin,
                            d.pm_checkout,
                            int(d.has_cdo),
                            int(d.has_leave),
                            int(d.has_travel),
                            int(d.has_locator),
                            int(d.has_fix_logs),
                        )
                        for d in record.details
                    ],
                )
            return compute_id

    def list_employee_ids(self, *, month: str, year: int, period: str, statuses: Sequence[str]) -> Sequence[str]:
        if not statuses:
            return []
        placeholders = ",".join(["%s"] * len(statuses))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT DISTINCT emp_objid
                FROM employee_computeddtr
                WHERE computedmonth=%s AND computedyear=%s AND period=%s
                  AND computestatus IN ({placeholders})
                """,
                (month, int(year), period, *statuses),
            )
            return [str(r["emp_objid"]) for r in fetchall(cur)]

    def list_periods_for_employees(
        self, *, month: str, year: int, employee_ids: Sequence[str], statuses: Sequence[str]
    ) -> Sequence[Tuple[str, str]]:
        if not employee_ids or not statuses:
            return []
        id_marks = ",".join(["%s"] * len(employee_ids))
        status_marks = ",".join(["%s"] * len(statuses))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT DISTINCT emp_objid, period
                FROM employee_computeddtr
                WHERE computedmonth=%s AND computedyear=%s
                  AND emp_objid IN ({id_marks})
                  AND computestatus IN ({status_marks})
                """,
                (month, int(year), *employee_ids, *statuses),
            )
            return [(str(r["emp_objid"]), str(r["period"])) for r in fetchall(cur)]
