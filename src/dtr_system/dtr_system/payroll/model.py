from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from ..core.constants import COMPUTED_DTR_DEFAULT_STATUS


@dataclass(frozen=True)
class ComputedDtrDetail:
    dtr_user_id: Optional[str]
    dtr_date: date
    am_checkin: Optional[str]
    am_checkout: Optional[str]
    pm_checkin: Optional[str]
    pm_checkout: Optional[str]
    has_cdo: bool = False
    # not populated: leave dates are not loaded per day, so rows store hasleave=0
    has_leave: bool = False
    has_travel: bool = False
    has_locator: bool = False
    has_fix_logs: bool = False


@dataclass(frozen=True)
class ComputedDtr:
    """Stored snapshot of one employee's computed attendance for a month period."""

    employee_id: str
    computed_month: str
    computed_year: int
    period: str
    total_lates: int
    total_days: float
    total_net_days: float
    total_cdo: int = 0
    total_travels: int = 0
    total_leaves: int = 0
    total_fix_times: int = 0
    status: str = COMPUTED_DTR_DEFAULT_STATUS
    remarks: Optional[str] = None
    batch_id: Optional[str] = None
    created_by: Optional[str] = None
    details: Tuple[ComputedDtrDetail, ...] = ()
