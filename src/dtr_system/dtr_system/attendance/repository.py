from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import ClockPunch


class PunchRepository(Protocol):
    def list_for_range(self, *, dtr_user_id: str, start: date, end: date) -> Sequence[ClockPunch]:
        raise NotImplementedError


class EmployeeRepository(Protocol):
    def resolve_employee_id(self, dtr_user_id: str) -> Optional[str]:
        """Map a biometric user id to the HR employee id, or None if unknown."""

        raise NotImplementedError
