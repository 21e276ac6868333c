from __future__ import annotations

from typing import Optional, Sequence

from ..model import NormalizedPunch
from .base import PunchSelectionStrategy


class LatestPunchStrategy(PunchSelectionStrategy):
    """Last departure of the day."""

    def select(self, candidates: Sequence[NormalizedPunch]) -> Optional[NormalizedPunch]:
        ordered = sorted(candidates, key=lambda p: p.minutes, reverse=True)
        return ordered[0] if ordered else None
