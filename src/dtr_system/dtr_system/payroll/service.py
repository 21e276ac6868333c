from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from ..attendance.service import AttendanceComputeService, ComputeResult
from ..core.constants import COMPUTED_DTR_DEFAULT_STATUS, COMPUTED_DTR_LOCKED_STATUSES
from ..core.enums import ComputePeriod
from ..core.exceptions import NotFoundError
from .model import ComputedDtr, ComputedDtrDetail
from .periods import month_name
from .repository import ComputedDtrRepository

logger = logging.getLogger(__name__)


class ComputedDtrService:
    """Persist computed attendance per employee + month + period-of-month."""

    def __init__(self, computed: ComputedDtrRepository, compute_service: AttendanceComputeService):
        self._computed = computed
        self._compute = compute_service

    @staticmethod
    def build_record(
        result: ComputeResult,
        *,
        year: int,
        month: int,
        period: ComputePeriod,
        status: str = COMPUTED_DTR_DEFAULT_STATUS,
        remarks: Optional[str] = None,
        created_by: Optional[str] = None,
        batch_id: Optional[str] = None,
    ) -> ComputedDtr:
        summary = result.computation.summary
        if summary is None:
            raise NotFoundError("No shift schedule assigned to employee")

        details = tuple(
            ComputedDtrDetail(
                dtr_user_id=result.dtr_user_id,
                dtr_date=d.work_date,
                am_checkin=d.selections.am_checkin,
                am_checkout=d.selections.am_checkout,
                pm_checkin=d.selections.pm_checkin,
                pm_checkout=d.selections.pm_checkout,
                has_cdo=d.has_cdo,
                has_travel=d.has_travel,
                has_locator=d.has_locator,
                has_fix_logs=d.has_fix_log,
            )
            for d in result.computation.days
        )

        return ComputedDtr(
            employee_id=result.employee_id,
            computed_month=month_name(month),
            computed_year=int(year),
            period=period.label,
            total_lates=summary.total_lateness_minutes,
            total_days=summary.total_days,
            total_net_days=summary.net_days,
            total_cdo=result.counts.cdo,
            total_travels=result.counts.travels,
            total_leaves=result.counts.leaves,
            total_fix_times=result.counts.fix_logs,
            status=status,
            remarks=(remarks or "").strip() or None,
            batch_id=batch_id,
            created_by=created_by,
            details=details,
        )

    def compute_and_save(
        self,
        *,
        dtr_user_id: str,
        year: int,
        month: int,
        period: ComputePeriod,
        remarks: Optional[str] = None,
        created_by: Optional[str] = None,
        batch_id: Optional[str] = None,
    ) -> Tuple[int, ComputeResult]:
        result = self._compute.calculate_period(dtr_user_id=dtr_user_id, year=year, month=month, period=period)
        record = self.build_record(
            result,
            year=year,
            month=month,
            period=period,
            remarks=remarks,
            created_by=created_by,
            batch_id=batch_id,
        )
        compute_id = self._computed.create(record)
        logger.info(
            "Saved computed DTR %s for employee %s (%s %s, %s)",
            compute_id,
            record.employee_id,
            record.computed_month,
            record.computed_year,
            record.period,
        )
        return compute_id, result

    def computed_employee_ids(self, *, month: int, year: int, period: ComputePeriod) -> Sequence[str]:
        return self._computed.list_employee_ids(
            month=month_name(month),
            year=int(year),
            period=period.label,
            statuses=COMPUTED_DTR_LOCKED_STATUSES,
        )

    def computed_periods(self, *, month: int, year: int, employee_ids: Sequence[str]) -> Dict[str, List[str]]:
        """Employees already computed for the month, grouped by period label."""
        periods: Dict[str, List[str]] = {
            p.label: [] for p in (ComputePeriod.FIRST, ComputePeriod.FULL, ComputePeriod.SECOND)
        }
        ids = [str(i).strip() for i in employee_ids if str(i).strip()]
        if not ids:
            return periods

        rows = self._computed.list_periods_for_employees(
            month=month_name(month),
            year=int(year),
            employee_ids=ids,
            statuses=COMPUTED_DTR_LOCKED_STATUSES,
        )
        for employee_id, label in rows:
            if label in periods:
                periods[label].append(employee_id)
        return periods
