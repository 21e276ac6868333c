from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import DaySelections
from ...core.enums import Checkpoint


class DayCreditCalculator(ABC):
    """Calculator interface (Strategy Pattern for day credits)."""

    @abstractmethod
    def credit(self, *, am_in: bool, am_out: bool, pm_in: bool, pm_out: bool) -> float:
        raise NotImplementedError

    def day_credit(self, selections: DaySelections) -> float:
        return self.credit(
            am_in=selections.present(Checkpoint.AM_CHECKIN),
            am_out=selections.present(Checkpoint.AM_CHECKOUT),
            pm_in=selections.present(Checkpoint.PM_CHECKIN),
            pm_out=selections.present(Checkpoint.PM_CHECKOUT),
        )
