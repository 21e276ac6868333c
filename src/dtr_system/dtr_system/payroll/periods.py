from __future__ import annotations

import calendar
from datetime import date
from typing import Tuple

from ..core.constants import FIRST_HALF_LAST_DAY
from ..core.enums import ComputePeriod


def period_date_range(year: int, month: int, period: ComputePeriod) -> Tuple[date, date]:
    """Inclusive date range of a month period (full, days 1-15, or 16 to month end)."""
    last_day = calendar.monthrange(year, month)[1]
    if period == ComputePeriod.FIRST:
        return date(year, month, 1), date(year, month, FIRST_HALF_LAST_DAY)
    if period == ComputePeriod.SECOND:
        return date(year, month, FIRST_HALF_LAST_DAY + 1), date(year, month, last_day)
    return date(year, month, 1), date(year, month, last_day)


def month_name(month: int) -> str:
    return calendar.month_name[month]
