from __future__ import annotations

from .base import DayCreditCalculator


class StandardDayCreditCalculator(DayCreditCalculator):
    """Standard rule: 1, 0.5 or 0 from which checkpoints were punched.

    Rows are checked in order and the first match wins.
    """

    def credit(self, *, am_in: bool, am_out: bool, pm_in: bool, pm_out: bool) -> float:
        if (
            (am_in and am_out and pm_in and pm_out)
            or (am_in and am_out and pm_out and not pm_in)
            or (am_in and pm_in and pm_out and not am_out)
            or (am_in and pm_out)
        ):
            return 1.0

        if (
            (am_in and am_out and not pm_in and not pm_out)
            or (not am_in and not am_out and pm_in and pm_out)
            or (not am_in and am_out and pm_in and pm_out)
            or (am_in and am_out and pm_in and not pm_out)
            or (am_in and not am_out and pm_in and not pm_out)
            or (not am_in and am_out and not pm_in and pm_out)
        ):
            return 0.5

        return 0.0
