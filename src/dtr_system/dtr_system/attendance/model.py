from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional, Tuple

from ..core.constants import RESPONSE_DAYS_PRECISION
from ..core.enums import Checkpoint, ComputeOutcome
from ..shifts.model import ShiftSchedule


@dataclass(frozen=True)
class ClockPunch:
    """Domain entity: one raw biometric punch, timestamp exactly as stored."""

    employee_id: str
    timestamp: Any


@dataclass(frozen=True)
class NormalizedPunch:
    punch_date: str
    punch_time: str
    minutes: int


@dataclass(frozen=True)
class DaySelections:
    """At most one selected ``HH:MM`` per checkpoint for a single date."""

    am_checkin: Optional[str] = None
    am_checkout: Optional[str] = None
    pm_checkin: Optional[str] = None
    pm_checkout: Optional[str] = None

    def get(self, checkpoint: Checkpoint) -> Optional[str]:
        return {
            Checkpoint.AM_CHECKIN: self.am_checkin,
            Checkpoint.AM_CHECKOUT: self.am_checkout,
            Checkpoint.PM_CHECKIN: self.pm_checkin,
            Checkpoint.PM_CHECKOUT: self.pm_checkout,
        }[checkpoint]

    def present(self, checkpoint: Checkpoint) -> bool:
        return bool(self.get(checkpoint))


@dataclass(frozen=True)
class DailyAttendanceRecord:
    """Read-model for one calendar date of a computation."""

    work_date: date
    selections: DaySelections
    lateness_minutes: int
    time_based_credit: float
    day_credit: float
    is_weekend: bool = False
    has_holiday: bool = False
    has_travel: bool = False
    has_cdo: bool = False
    has_fix_log: bool = False
    has_locator: bool = False

    @property
    def has_exception(self) -> bool:
        return self.has_travel or self.has_cdo or self.has_fix_log or self.has_locator

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dtrdate": self.work_date.strftime("%Y-%m-%d"),
            "am_checkin": self.selections.am_checkin,
            "am_checkout": self.selections.am_checkout,
            "pm_checkin": self.selections.pm_checkin,
            "pm_checkout": self.selections.pm_checkout,
            "late_minutes": self.lateness_minutes,
            "days": self.day_credit,
            "is_weekend": self.is_weekend,
            "has_holiday": self.has_holiday,
            "hastravel": int(self.has_travel),
            "hascdo": int(self.has_cdo),
            "hasfixlogs": int(self.has_fix_log),
            "haslocator": int(self.has_locator),
        }


@dataclass(frozen=True)
class PeriodSummary:
    total_lateness_minutes: int
    total_days: float
    net_days: float
    equivalent_days_deducted: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalLates": self.total_lateness_minutes,
            "totalDays": self.total_days,
            "netDays": self.net_days,
            "equivalentDaysDeducted": round(self.equivalent_days_deducted, RESPONSE_DAYS_PRECISION),
        }


@dataclass(frozen=True)
class AttendanceComputation:
    """Result of one engine invocation.

    ``summary`` is None exactly when ``outcome`` is NO_SCHEDULE, so callers can
    tell "worked zero days" apart from "cannot be computed".
    """

    outcome: ComputeOutcome
    start: date
    end: date
    summary: Optional[PeriodSummary] = None
    days: Tuple[DailyAttendanceRecord, ...] = field(default_factory=tuple)
    shift_schedule: Optional[ShiftSchedule] = None

    @property
    def ok(self) -> bool:
        return self.outcome == ComputeOutcome.OK

    @classmethod
    def no_schedule(cls, *, start: date, end: date, shift_schedule: Optional[ShiftSchedule] = None) -> "AttendanceComputation":
        return cls(outcome=ComputeOutcome.NO_SCHEDULE, start=start, end=end, shift_schedule=shift_schedule)
