"""Resolve each checkpoint of a schedule into a minutes-since-midnight window."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from ..common.datetime_utils import time_to_minutes
from ..core.constants import (
    FALLBACK_AM_CHECKIN_WINDOW,
    FALLBACK_AM_CHECKOUT_WINDOW,
    FALLBACK_PM_CHECKIN_WINDOW,
    FALLBACK_PM_CHECKOUT_WINDOW,
)
from ..core.enums import Checkpoint
from .model import ShiftSchedule

FALLBACK_WINDOWS = {
    Checkpoint.AM_CHECKIN: FALLBACK_AM_CHECKIN_WINDOW,
    Checkpoint.AM_CHECKOUT: FALLBACK_AM_CHECKOUT_WINDOW,
    Checkpoint.PM_CHECKIN: FALLBACK_PM_CHECKIN_WINDOW,
    Checkpoint.PM_CHECKOUT: FALLBACK_PM_CHECKOUT_WINDOW,
}


@dataclass(frozen=True)
class ResolvedWindow:
    checkpoint: Checkpoint
    active: bool
    expected_minutes: Optional[int] = None
    start: Optional[int] = None
    end: Optional[int] = None

    @property
    def usable(self) -> bool:
        return self.active and self.start is not None and self.end is not None

    def contains(self, minutes: int) -> bool:
        """Inclusive on both bounds."""
        if not self.usable:
            return False
        return self.start <= minutes <= self.end


def resolve_window(schedule: ShiftSchedule, checkpoint: Checkpoint) -> ResolvedWindow:
    definition = schedule.checkpoint(checkpoint)
    if not definition.active:
        return ResolvedWindow(checkpoint=checkpoint, active=False)

    if definition.window_start and definition.window_end:
        start_s, end_s = definition.window_start, definition.window_end
    else:
        start_s, end_s = FALLBACK_WINDOWS[checkpoint]

    start, end = time_to_minutes(start_s), time_to_minutes(end_s)
    if start is None or end is None:
        # Unreadable bound: the checkpoint stays active but selects nothing.
        start = end = None

    return ResolvedWindow(
        checkpoint=checkpoint,
        active=True,
        expected_minutes=time_to_minutes(definition.expected),
        start=start,
        end=end,
    )


def resolve_windows(schedule: ShiftSchedule) -> Dict[Checkpoint, ResolvedWindow]:
    return {cp: resolve_window(schedule, cp) for cp in Checkpoint}
