from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence, Tuple

from ..approvals.model import ExceptionRecord
from ..approvals.repository import ApprovalRepository
from ..core.constants import RESPONSE_DAYS_PRECISION
from ..core.enums import ComputePeriod, ExceptionKind
from ..core.exceptions import NotFoundError, ValidationError
from ..payroll.periods import period_date_range
from ..shifts.merge import merge_assigned_shifts
from ..shifts.repository import ShiftRepository
from .engine import AttendanceEngine
from .model import AttendanceComputation, DailyAttendanceRecord
from .repository import EmployeeRepository, PunchRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExceptionCounts:
    locators: int = 0
    leaves: int = 0
    travels: int = 0
    cdo: int = 0
    fix_logs: int = 0

    @classmethod
    def from_records(cls, records: Sequence[ExceptionRecord], *, leaves: int = 0) -> "ExceptionCounts":
        def _count(kind: ExceptionKind) -> int:
            return sum(1 for r in records if r.kind == kind and r.approved)

        # one travel order covers several dates; count orders, not dates
        travel_orders = {
            r.source_id if r.source_id is not None else r.date_key
            for r in records
            if r.kind == ExceptionKind.TRAVEL and r.approved
        }

        return cls(
            locators=_count(ExceptionKind.LOCATOR),
            leaves=int(leaves),
            travels=len(travel_orders),
            cdo=_count(ExceptionKind.CDO),
            fix_logs=_count(ExceptionKind.FIX_LOG),
        )

    def to_dict(self) -> dict:
        return {
            "locatorsCount": self.locators,
            "leavesCount": self.leaves,
            "travelsCount": self.travels,
            "cdoCount": self.cdo,
            "fixLogsCount": self.fix_logs,
        }


@dataclass(frozen=True)
class ComputeResult:
    dtr_user_id: str
    employee_id: str
    computation: AttendanceComputation
    counts: ExceptionCounts
    logs_count: int = 0

    def to_dict(self) -> dict:
        comp = self.computation
        if comp.summary is not None:
            data = comp.summary.to_dict()
        else:
            data = {"totalLates": 0, "totalDays": 0, "netDays": 0, "equivalentDaysDeducted": 0}
        data.update(self.counts.to_dict())
        data["dailyData"] = [dict(d.to_dict(), dtruserid=self.dtr_user_id) for d in comp.days]

        return {
            "success": comp.ok,
            "outcome": comp.outcome.value,
            "data": data,
            "shiftSchedule": comp.shift_schedule.to_dict() if comp.shift_schedule else None,
            "logsCount": self.logs_count,
            "range": {
                "startDate": comp.start.strftime("%Y-%m-%d"),
                "endDate": comp.end.strftime("%Y-%m-%d"),
            },
        }


class AttendanceComputeService:
    """Load an employee's inputs from the stores and run the engine over them."""

    def __init__(
        self,
        punches: PunchRepository,
        employees: EmployeeRepository,
        shifts: ShiftRepository,
        approvals: ApprovalRepository,
        *,
        engine: Optional[AttendanceEngine] = None,
    ):
        self._punches = punches
        self._employees = employees
        self._shifts = shifts
        self._approvals = approvals
        self._engine = engine or AttendanceEngine()

    def _require_employee(self, dtr_user_id: str) -> str:
        employee_id = self._employees.resolve_employee_id(str(dtr_user_id))
        if not employee_id:
            raise NotFoundError(f"Employee {dtr_user_id} not found")
        return employee_id

    def calculate(self, *, dtr_user_id: str, start: date, end: date) -> ComputeResult:
        if end < start:
            raise ValidationError("endDate must not be before startDate")

        dtr_user_id = str(dtr_user_id)
        employee_id = self._require_employee(dtr_user_id)
        schedule = merge_assigned_shifts(self._shifts.list_assigned(employee_id))

        if schedule is None or not schedule.has_active_checkpoint:
            logger.info("No shift schedule assigned to employee %s (dtr user %s)", employee_id, dtr_user_id)
            return ComputeResult(
                dtr_user_id=dtr_user_id,
                employee_id=employee_id,
                computation=AttendanceComputation.no_schedule(start=start, end=end, shift_schedule=schedule),
                counts=ExceptionCounts(),
            )

        punches = self._punches.list_for_range(dtr_user_id=dtr_user_id, start=start, end=end)
        exceptions = self._approvals.list_exceptions(employee_id=employee_id, start=start, end=end)
        holidays = self._approvals.list_holidays(start=start, end=end)
        leaves = self._approvals.count_leaves(employee_id=employee_id, start=start, end=end)

        computation = self._engine.calculate(
            punches=punches,
            shift_schedule=schedule,
            start=start,
            end=end,
            exceptions=exceptions,
            holidays=holidays,
            employee_id=employee_id,
        )
        if computation.summary is not None:
            logger.info(
                "Computed attendance for %s %s..%s: days=%s lates=%s net=%s",
                employee_id,
                start,
                end,
                computation.summary.total_days,
                computation.summary.total_lateness_minutes,
                round(computation.summary.net_days, RESPONSE_DAYS_PRECISION),
            )

        return ComputeResult(
            dtr_user_id=dtr_user_id,
            employee_id=employee_id,
            computation=computation,
            counts=ExceptionCounts.from_records(exceptions, leaves=leaves),
            logs_count=len(punches),
        )

    def calculate_period(self, *, dtr_user_id: str, year: int, month: int, period: ComputePeriod) -> ComputeResult:
        start, end = period_date_range(year, month, period)
        return self.calculate(dtr_user_id=dtr_user_id, start=start, end=end)

    def daily_records(self, *, dtr_user_id: str, start: date, end: date) -> Tuple[DailyAttendanceRecord, ...]:
        """Per-day breakdown for detail views and fix-time suggestions."""
        return self.calculate(dtr_user_id=dtr_user_id, start=start, end=end).computation.days
