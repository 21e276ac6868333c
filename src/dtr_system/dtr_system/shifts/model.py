from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import Checkpoint, ShiftTimeMode


@dataclass(frozen=True)
class ShiftType:
    """Domain entity: a shift type record covering the AM half, the PM half or both.

    Times are ``HH:MM`` strings read literally from storage.
    """

    shift_id: int
    shift_name: str
    time_mode: Optional[ShiftTimeMode]
    checkin: Optional[str] = None
    checkin_start: Optional[str] = None
    checkin_end: Optional[str] = None
    checkout: Optional[str] = None
    checkout_start: Optional[str] = None
    checkout_end: Optional[str] = None
    credits: Optional[float] = None


@dataclass(frozen=True)
class CheckpointDefinition:
    expected: Optional[str] = None
    window_start: Optional[str] = None
    window_end: Optional[str] = None

    @property
    def active(self) -> bool:
        return bool(self.expected)


@dataclass(frozen=True)
class ShiftSchedule:
    """An employee's effective schedule: up to four checkpoint definitions."""

    shift_name: Optional[str] = None
    am_checkin: CheckpointDefinition = field(default_factory=CheckpointDefinition)
    am_checkout: CheckpointDefinition = field(default_factory=CheckpointDefinition)
    pm_checkin: CheckpointDefinition = field(default_factory=CheckpointDefinition)
    pm_checkout: CheckpointDefinition = field(default_factory=CheckpointDefinition)

    def checkpoint(self, checkpoint: Checkpoint) -> CheckpointDefinition:
        return {
            Checkpoint.AM_CHECKIN: self.am_checkin,
            Checkpoint.AM_CHECKOUT: self.am_checkout,
            Checkpoint.PM_CHECKIN: self.pm_checkin,
            Checkpoint.PM_CHECKOUT: self.pm_checkout,
        }[checkpoint]

    @property
    def has_active_checkpoint(self) -> bool:
        return any(self.checkpoint(cp).active for cp in Checkpoint)

    def to_dict(self) -> dict:
        out: dict = {"SHIFTNAME": self.shift_name}
        for cp in Checkpoint:
            definition = self.checkpoint(cp)
            out[f"SHIFT_{cp.value.replace('_', '')}"] = definition.expected
            out[f"SHIFT_{cp.value.replace('_', '')}_START"] = definition.window_start
            out[f"SHIFT_{cp.value.replace('_', '')}_END"] = definition.window_end
        return out
