from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..model import NormalizedPunch


class PunchSelectionStrategy(ABC):
    """Strategy Pattern: encapsulate which in-window punch satisfies a checkpoint."""

    @abstractmethod
    def select(self, candidates: Sequence[NormalizedPunch]) -> Optional[NormalizedPunch]:
        raise NotImplementedError
