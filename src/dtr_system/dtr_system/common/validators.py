from __future__ import annotations

from datetime import date
from typing import Any, Tuple

from ..core.enums import ComputePeriod
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Any, field_name: str) -> str:
    text = "" if value is None else str(value)
    if not text.strip():
        raise ValidationError(f"{field_name} is required")
    return text.strip()


def require_date(value: Any, field_name: str) -> date:
    require_non_empty(value, field_name)
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")


def require_date_range(start: Any, end: Any) -> Tuple[date, date]:
    start_d = require_date(start, "startDate")
    end_d = require_date(end, "endDate")
    if end_d < start_d:
        raise ValidationError("endDate must not be before startDate")
    return start_d, end_d


def require_int_between(value: Any, field_name: str, low: int, high: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not low <= number <= high:
        raise ValidationError(f"{field_name} must be between {low} and {high}")
    return number


def require_period(value: Any) -> ComputePeriod:
    """Accept either the short code (``full``) or the stored label (``Full Month``)."""
    text = require_non_empty(value, "period")
    for period in ComputePeriod:
        if text.lower() == period.value or text == period.label:
            return period
    raise ValidationError(f"Unknown period: {text}")
