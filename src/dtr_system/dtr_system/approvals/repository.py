from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import ExceptionRecord, Holiday


class ApprovalRepository(Protocol):
    def list_exceptions(self, *, employee_id: str, start: date, end: date) -> Sequence[ExceptionRecord]:
        """Approved travel, CDO, fix-log and locator records dated within the range."""

        raise NotImplementedError

    def list_holidays(self, *, start: date, end: date) -> Sequence[Holiday]:
        """Active holidays: every recurring one plus fixed ones within the range."""

        raise NotImplementedError

    def count_leaves(self, *, employee_id: str, start: date, end: date) -> int:
        raise NotImplementedError
