from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Checkpoint
from .strategies.base import PunchSelectionStrategy
from .strategies.earliest_strategy import EarliestPunchStrategy
from .strategies.latest_strategy import LatestPunchStrategy


@dataclass
class PunchSelectionStrategyFactory:
    """Factory Pattern: choose the selection strategy for a checkpoint."""

    def for_checkpoint(self, checkpoint: Checkpoint) -> PunchSelectionStrategy:
        if checkpoint == Checkpoint.PM_CHECKOUT:
            return LatestPunchStrategy()
        return EarliestPunchStrategy()
