from __future__ import annotations

from typing import Protocol, Sequence

from .model import ShiftType


class ShiftRepository(Protocol):
    def list_assigned(self, employee_id: str) -> Sequence[ShiftType]:
        """Shift types currently in use by the employee, newest assignment first."""

        raise NotImplementedError
