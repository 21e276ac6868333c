from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import SHIFT_NAME_SEPARATOR
from .model import CheckpointDefinition, ShiftSchedule, ShiftType


def _checkin(shift: ShiftType) -> CheckpointDefinition:
    return CheckpointDefinition(
        expected=shift.checkin or None,
        window_start=shift.checkin_start or None,
        window_end=shift.checkin_end or None,
    )


def _checkout(shift: ShiftType) -> CheckpointDefinition:
    return CheckpointDefinition(
        expected=shift.checkout or None,
        window_start=shift.checkout_start or None,
        window_end=shift.checkout_end or None,
    )


def merge_assigned_shifts(shifts: Sequence[ShiftType]) -> Optional[ShiftSchedule]:
    """Combine an employee's assigned shift types into one schedule.

    AM checkpoints come from the first AM-bearing shift, PM checkpoints from the
    first PM-bearing shift (an AMPM shift bears both). Returns None when nothing
    is assigned.
    """
    if not shifts:
        return None

    am_shift = next((s for s in shifts if s.time_mode and s.time_mode.covers_am), None)
    pm_shift = next((s for s in shifts if s.time_mode and s.time_mode.covers_pm), None)

    names: list[str] = []
    for s in shifts:
        if s.shift_name and s.shift_name not in names:
            names.append(s.shift_name)

    empty = CheckpointDefinition()
    return ShiftSchedule(
        shift_name=SHIFT_NAME_SEPARATOR.join(names) or None,
        am_checkin=_checkin(am_shift) if am_shift else empty,
        am_checkout=_checkout(am_shift) if am_shift else empty,
        pm_checkin=_checkin(pm_shift) if pm_shift else empty,
        pm_checkout=_checkout(pm_shift) if pm_shift else empty,
    )
