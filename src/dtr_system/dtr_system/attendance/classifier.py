from __future__ import annotations

from typing import Dict, Optional, Sequence

from ..core.enums import Checkpoint
from ..shifts.windows import ResolvedWindow
from .factory import PunchSelectionStrategyFactory
from .model import DaySelections, NormalizedPunch


class DailyPunchClassifier:
    """Pick at most one punch per checkpoint for a single date.

    Each checkpoint filters the day's punches by its own window, so a punch in
    the overlap of two windows can be selected by both.
    """

    def __init__(self, strategy_factory: Optional[PunchSelectionStrategyFactory] = None):
        self._factory = strategy_factory or PunchSelectionStrategyFactory()

    def select(self, punches: Sequence[NormalizedPunch], window: ResolvedWindow) -> Optional[NormalizedPunch]:
        if not window.usable:
            return None
        candidates = [p for p in punches if window.contains(p.minutes)]
        return self._factory.for_checkpoint(window.checkpoint).select(candidates)

    def classify(self, punches: Sequence[NormalizedPunch], windows: Dict[Checkpoint, ResolvedWindow]) -> DaySelections:
        chosen: Dict[Checkpoint, Optional[str]] = {}
        for cp in Checkpoint:
            punch = self.select(punches, windows[cp])
            chosen[cp] = punch.punch_time if punch else None

        return DaySelections(
            am_checkin=chosen[Checkpoint.AM_CHECKIN],
            am_checkout=chosen[Checkpoint.AM_CHECKOUT],
            pm_checkin=chosen[Checkpoint.PM_CHECKIN],
            pm_checkout=chosen[Checkpoint.PM_CHECKOUT],
        )
