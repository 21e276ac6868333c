from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, Optional, Set

from ..common.datetime_utils import is_weekend
from ..core.enums import ExceptionKind
from .model import ExceptionRecord, Holiday


@dataclass(frozen=True)
class OverlayDecision:
    day_credit: float
    is_weekend: bool
    has_holiday: bool
    kinds: frozenset

    def has(self, kind: ExceptionKind) -> bool:
        return kind in self.kinds


class ExceptionOverlay:
    """Apply approved exceptions, weekends and holidays on top of time-based credit.

    Built once per computation; records that are unapproved, belong to another
    employee, or carry no readable date are ignored.
    """

    def __init__(
        self,
        exceptions: Iterable[ExceptionRecord] = (),
        holidays: Iterable[Holiday] = (),
        *,
        employee_id: Optional[str] = None,
    ):
        self._by_date: Dict[str, Set[ExceptionKind]] = {}
        for rec in exceptions:
            if not rec.approved or not rec.date_key:
                continue
            if employee_id is not None and str(rec.employee_id) != str(employee_id):
                continue
            self._by_date.setdefault(rec.date_key, set()).add(rec.kind)

        self._holidays = [h for h in holidays if h.is_active and h.date_key]

    def kinds_on(self, date_key: str) -> frozenset:
        return frozenset(self._by_date.get(date_key, ()))

    def is_holiday(self, date_key: str) -> bool:
        return any(h.matches(date_key) for h in self._holidays)

    def apply(self, work_date: date, time_based_credit: float) -> OverlayDecision:
        date_key = work_date.strftime("%Y-%m-%d")
        kinds = self.kinds_on(date_key)
        weekend = is_weekend(work_date)
        holiday = self.is_holiday(date_key)

        if kinds:
            credit = 1.0
        elif (weekend or holiday) and time_based_credit == 0:
            # Not a working day: stays 0 without being counted as an absence.
            credit = 0.0
        else:
            credit = time_based_credit

        return OverlayDecision(day_credit=credit, is_weekend=weekend, has_holiday=holiday, kinds=kinds)
