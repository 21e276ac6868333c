from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.datetime_utils import extract_date
from ..core.enums import ExceptionKind


def is_approved(status: Any) -> bool:
    return str(status or "").strip().upper() == "APPROVED"


@dataclass(frozen=True)
class ExceptionRecord:
    """An approval-tracked justification for one date (travel, CDO, fix log, locator).

    ``source_id`` names the order a date belongs to when one order spans
    several dates (travel).
    """

    kind: ExceptionKind
    employee_id: str
    record_date: Any
    status: Optional[str] = None
    source_id: Any = None

    @property
    def approved(self) -> bool:
        return is_approved(self.status)

    @property
    def date_key(self) -> str:
        """``YYYY-MM-DD`` or ``""`` when the date is missing or unreadable."""
        return extract_date(self.record_date)


@dataclass(frozen=True)
class Holiday:
    name: str
    holiday_date: Any
    is_recurring: bool = False
    is_active: bool = True

    @property
    def date_key(self) -> str:
        return extract_date(self.holiday_date)

    def matches(self, date_key: str) -> bool:
        own = self.date_key
        if not own or len(date_key) < 10:
            return False
        if self.is_recurring:
            return own[5:10] == date_key[5:10]
        return own == date_key
