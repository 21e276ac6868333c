"""Literal date/time extraction for stored wall-clock values.

Punch timestamps, shift times and exception dates are stored in local time
already. Every helper here reads the digits as written and never converts
between timezones, so a value like ``2025-01-15T23:50:00Z`` stays on the 15th
at 23:50.
"""
from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Any, Iterator, Optional, Tuple

_YMD_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")
_HHMM_RE = re.compile(r"^\d{2}:\d{2}$")
_ISO_TIME_RE = re.compile(r"T(\d{2}):(\d{2})")
_ANY_TIME_RE = re.compile(r"(\d{2}):(\d{2})")


def extract_date(value: Any) -> str:
    """Return ``YYYY-MM-DD`` read from the value, or ``""`` if none matches."""
    if value is None:
        return ""
    if isinstance(value, (datetime, date)):
        return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"

    match = _YMD_RE.match(str(value).strip())
    if not match:
        return ""
    return f"{match.group(1)}-{match.group(2)}-{match.group(3)}"


def extract_time(value: Any) -> str:
    """Return ``HH:MM`` read from the value, or ``""`` if none matches."""
    if value is None:
        return ""
    if isinstance(value, (datetime, time)):
        return f"{value.hour:02d}:{value.minute:02d}"
    if isinstance(value, timedelta):
        # mysql-connector returns TIME columns as timedelta
        total_minutes = (int(value.total_seconds()) // 60) % (24 * 60)
        return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"
    if isinstance(value, date):
        return ""

    text = str(value).strip()
    if _HHMM_RE.match(text):
        return text
    match = _ISO_TIME_RE.search(text) or _ANY_TIME_RE.search(text)
    if not match:
        return ""
    return f"{match.group(1)}:{match.group(2)}"


def normalize_timestamp(value: Any) -> Optional[Tuple[str, str]]:
    """Split a punch timestamp into ``(YYYY-MM-DD, HH:MM)``.

    Returns None when either part cannot be read; such punches never reach a
    day's candidate set.
    """
    day = extract_date(value)
    if not day:
        return None
    clock = extract_time(value)
    if not clock:
        return None
    return day, clock


def time_to_minutes(value: Any) -> Optional[int]:
    """Minutes since midnight for an ``HH:MM``-bearing value."""
    clock = extract_time(value)
    if not clock:
        return None
    hours, minutes = clock.split(":")
    hours_i, minutes_i = int(hours), int(minutes)
    if hours_i > 23 or minutes_i > 59:
        return None
    return hours_i * 60 + minutes_i


def parse_iso_date(value: Any) -> date:
    """Parse YYYY-MM-DD (optionally followed by a time) into date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(extract_date(value), "%Y-%m-%d").date()


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Every calendar date from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5
