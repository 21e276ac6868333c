from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .approvals.mysql_approval_repository import MySQLApprovalRepository
from .attendance.engine import AttendanceEngine
from .attendance.mysql_employee_repository import MySQLEmployeeRepository
from .attendance.mysql_punch_repository import MySQLPunchRepository
from .attendance.service import AttendanceComputeService
from .database.connection import DBConfig, DatabaseConnection
from .payroll.mysql_computed_dtr_repository import MySQLComputedDtrRepository
from .payroll.service import ComputedDtrService
from .shifts.mysql_shift_repository import MySQLShiftRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    punch_conn: DatabaseConnection

    punches_repo: MySQLPunchRepository
    employees_repo: MySQLEmployeeRepository
    shifts_repo: MySQLShiftRepository
    approvals_repo: MySQLApprovalRepository
    computed_repo: MySQLComputedDtrRepository

    engine: AttendanceEngine
    compute_service: AttendanceComputeService
    computed_dtr_service: ComputedDtrService


def build_container(*, db_config: dict, punch_db_config: Optional[dict] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    punch_conn = DatabaseConnection.get_instance(DBConfig.from_dict(punch_db_config or db_config))

    punches_repo = MySQLPunchRepository(punch_conn)
    employees_repo = MySQLEmployeeRepository(conn)
    shifts_repo = MySQLShiftRepository(conn)
    approvals_repo = MySQLApprovalRepository(conn)
    computed_repo = MySQLComputedDtrRepository(conn)

    engine = AttendanceEngine()
    compute_service = AttendanceComputeService(
        punches_repo,
        employees_repo,
        shifts_repo,
        approvals_repo,
        engine=engine,
    )
    computed_dtr_service = ComputedDtrService(computed_repo, compute_service)

    return Container(
        conn=conn,
        punch_conn=punch_conn,
        punches_repo=punches_repo,
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        approvals_repo=approvals_repo,
        computed_repo=computed_repo,
        engine=engine,
        compute_service=compute_service,
        computed_dtr_service=computed_dtr_service,
    )
