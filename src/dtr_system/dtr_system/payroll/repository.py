from __future__ import annotations

from typing import Protocol, Sequence, Tuple

from .model import ComputedDtr


class ComputedDtrRepository(Protocol):
    def create(self, record: ComputedDtr) -> int:
        """Insert header and detail rows together; returns the compute id."""

        raise NotImplementedError

    def list_employee_ids(self, *, month: str, year: int, period: str, statuses: Sequence[str]) -> Sequence[str]:
        raise NotImplementedError

    def list_periods_for_employees(
        self, *, month: str, year: int, employee_ids: Sequence[str], statuses: Sequence[str]
    ) -> Sequence[Tuple[str, str]]:
        """Distinct ``(employee_id, period label)`` pairs computed for the month."""

        raise NotImplementedError
