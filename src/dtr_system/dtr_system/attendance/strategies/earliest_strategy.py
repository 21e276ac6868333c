from __future__ import annotations

from typing import Optional, Sequence

from ..model import NormalizedPunch
from .base import PunchSelectionStrategy


class EarliestPunchStrategy(PunchSelectionStrategy):
    """First arrival / first mid-day departure."""

    def select(self, candidates: Sequence[NormalizedPunch]) -> Optional[NormalizedPunch]:
        ordered = sorted(candidates, key=lambda p: p.minutes)
        return ordered[0] if ordered else None
