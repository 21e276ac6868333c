from __future__ import annotations

from typing import Dict

from ..common.datetime_utils import time_to_minutes
from ..core.enums import Checkpoint
from ..shifts.windows import ResolvedWindow
from .model import DaySelections


class LatenessCalculator:
    """Late arrival on check-ins, early departure on check-outs.

    Leaving after the expected check-out time is never penalized.
    """

    def checkpoint_minutes(self, checkpoint: Checkpoint, actual: int, expected: int) -> int:
        if checkpoint.is_checkin:
            return actual - expected if actual > expected else 0
        return expected - actual if actual < expected else 0

    def breakdown(self, selections: DaySelections, windows: Dict[Checkpoint, ResolvedWindow]) -> Dict[Checkpoint, int]:
        out: Dict[Checkpoint, int] = {}
        for cp in Checkpoint:
            window = windows[cp]
            actual = time_to_minutes(selections.get(cp))
            if not window.active or window.expected_minutes is None or actual is None:
                out[cp] = 0
                continue
            out[cp] = self.checkpoint_minutes(cp, actual, window.expected_minutes)
        return out

    def daily_minutes(self, selections: DaySelections, windows: Dict[Checkpoint, ResolvedWindow]) -> int:
        return sum(self.breakdown(selections, windows).values())
