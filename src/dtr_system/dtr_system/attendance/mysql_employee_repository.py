from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def resolve_employee_id(self, dtr_user_id: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT objid FROM employees WHERE TRIM(CAST(dtruserid AS CHAR))=%s LIMIT 1",
                (str(dtr_user_id).strip(),),
            )
            r = fetchone(cur)
            return str(r["objid"]) if r else None
