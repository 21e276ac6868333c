"""Attendance computation engine.

Turns one employee's raw punches into per-day records and period totals for an
inclusive date range. The engine keeps no state between calls; every
invocation builds its windows, punch index and overlay from its arguments, so
concurrent computations for different employees cannot interfere.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from ..approvals.model import ExceptionRecord, Holiday
from ..approvals.overlay import ExceptionOverlay
from ..common.datetime_utils import iter_dates, normalize_timestamp, time_to_minutes
from ..core.constants import MINUTES_PER_WORKDAY, NET_DAYS_PRECISION
from ..core.enums import Checkpoint, ComputeOutcome, ExceptionKind
from ..payroll.calculator.base import DayCreditCalculator
from ..payroll.calculator.standard_calculator import StandardDayCreditCalculator
from ..shifts.model import ShiftSchedule
from ..shifts.windows import ResolvedWindow, resolve_windows
from .classifier import DailyPunchClassifier
from .lateness import LatenessCalculator
from .model import (
    AttendanceComputation,
    ClockPunch,
    DailyAttendanceRecord,
    NormalizedPunch,
    PeriodSummary,
)

logger = logging.getLogger(__name__)


class AttendanceEngine:
    def __init__(
        self,
        *,
        classifier: Optional[DailyPunchClassifier] = None,
        lateness: Optional[LatenessCalculator] = None,
        credit_calculator: Optional[DayCreditCalculator] = None,
    ):
        self._classifier = classifier or DailyPunchClassifier()
        self._lateness = lateness or LatenessCalculator()
        self._credits = credit_calculator or StandardDayCreditCalculator()

    @staticmethod
    def group_punches(punches: Iterable[ClockPunch]) -> Dict[str, List[NormalizedPunch]]:
        """Index punches by ``YYYY-MM-DD``; unreadable timestamps are dropped."""
        by_date: Dict[str, List[NormalizedPunch]] = {}
        for punch in punches:
            parts = normalize_timestamp(punch.timestamp)
            minutes = time_to_minutes(parts[1]) if parts else None
            if parts is None or minutes is None:
                logger.debug("Dropping unreadable punch %r for employee %s", punch.timestamp, punch.employee_id)
                continue
            by_date.setdefault(parts[0], []).append(
                NormalizedPunch(punch_date=parts[0], punch_time=parts[1], minutes=minutes)
            )
        return by_date

    def compute_day(
        self,
        work_date: date,
        punches: Sequence[NormalizedPunch],
        windows: Dict[Checkpoint, ResolvedWindow],
        overlay: ExceptionOverlay,
    ) -> DailyAttendanceRecord:
        selections = self._classifier.classify(punches, windows)
        late = self._lateness.daily_minutes(selections, windows)
        time_based = self._credits.day_credit(selections)
        decision = overlay.apply(work_date, time_based)

        return DailyAttendanceRecord(
            work_date=work_date,
            selections=selections,
            lateness_minutes=late,
            time_based_credit=time_based,
            day_credit=decision.day_credit,
            is_weekend=decision.is_weekend,
            has_holiday=decision.has_holiday,
            has_travel=decision.has(ExceptionKind.TRAVEL),
            has_cdo=decision.has(ExceptionKind.CDO),
            has_fix_log=decision.has(ExceptionKind.FIX_LOG),
            has_locator=decision.has(ExceptionKind.LOCATOR),
        )

    @staticmethod
    def summarize(days: Sequence[DailyAttendanceRecord]) -> PeriodSummary:
        total_lates = 0.0
        total_days = 0.0
        equivalent_days = 0.0
        for day in days:
            total_lates += day.lateness_minutes
            total_days += day.day_credit
            equivalent_days += day.lateness_minutes / MINUTES_PER_WORKDAY

        net_days = max(0.0, total_days - total_lates / MINUTES_PER_WORKDAY)
        return PeriodSummary(
            total_lateness_minutes=int(round(total_lates)),
            total_days=total_days,
            net_days=round(net_days, NET_DAYS_PRECISION),
            equivalent_days_deducted=equivalent_days,
        )

    def calculate(
        self,
        *,
        punches: Iterable[ClockPunch],
        shift_schedule: Optional[ShiftSchedule],
        start: date,
        end: date,
        exceptions: Iterable[ExceptionRecord] = (),
        holidays: Iterable[Holiday] = (),
        employee_id: Optional[str] = None,
    ) -> AttendanceComputation:
        if shift_schedule is None or not shift_schedule.has_active_checkpoint:
            return AttendanceComputation.no_schedule(start=start, end=end, shift_schedule=shift_schedule)

        windows = resolve_windows(shift_schedule)
        logger.debug(
            "Resolved windows: %s",
            {cp.value: (w.start, w.end) for cp, w in windows.items()},
        )

        by_date = self.group_punches(punches)
        overlay = ExceptionOverlay(exceptions, holidays, employee_id=employee_id)

        days = tuple(
            self.compute_day(d, by_date.get(d.strftime("%Y-%m-%d"), []), windows, overlay)
            for d in iter_dates(start, end)
        )
        summary = self.summarize(days)
        logger.debug("Computed %d days from %s to %s: %s", len(days), start, end, summary)

        return AttendanceComputation(
            outcome=ComputeOutcome.OK,
            start=start,
            end=end,
            summary=summary,
            days=days,
            shift_schedule=shift_schedule,
        )
