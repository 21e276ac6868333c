from __future__ import annotations

from enum import Enum
from typing import Optional


class Checkpoint(str, Enum):
    """The four expected daily clock events, in evaluation order."""

    AM_CHECKIN = "AM_CHECKIN"
    AM_CHECKOUT = "AM_CHECKOUT"
    PM_CHECKIN = "PM_CHECKIN"
    PM_CHECKOUT = "PM_CHECKOUT"

    @property
    def is_checkin(self) -> bool:
        return self in (Checkpoint.AM_CHECKIN, Checkpoint.PM_CHECKIN)


class ShiftTimeMode(str, Enum):
    """Which half of the day a shift type record covers."""

    AM = "AM"
    PM = "PM"
    AMPM = "AMPM"

    @classmethod
    def parse(cls, value) -> Optional["ShiftTimeMode"]:
        """None for a blank or unknown mode; such a shift covers neither half."""
        text = str(value or "").strip().upper()
        try:
            return cls(text)
        except ValueError:
            return None

    @property
    def covers_am(self) -> bool:
        return self in (ShiftTimeMode.AM, ShiftTimeMode.AMPM)

    @property
    def covers_pm(self) -> bool:
        return self in (ShiftTimeMode.PM, ShiftTimeMode.AMPM)


class ExceptionKind(str, Enum):
    """Approved justifications that force a full day credit."""

    TRAVEL = "TRAVEL"
    CDO = "CDO"
    FIX_LOG = "FIX_LOG"
    LOCATOR = "LOCATOR"


class ComputeOutcome(str, Enum):
    OK = "OK"
    NO_SCHEDULE = "NO_SCHEDULE"


class ComputePeriod(str, Enum):
    """Period-of-month a computed DTR is stored under."""

    FULL = "full"
    FIRST = "first"
    SECOND = "second"

    @property
    def label(self) -> str:
        return {
            ComputePeriod.FULL: "Full Month",
            ComputePeriod.FIRST: "1st Half",
            ComputePeriod.SECOND: "2nd Half",
        }[self]
