from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import extract_date, extract_time
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def first_present(row: Dict[str, Any], *keys: str) -> Any:
    """Value of the first key that is set and non-empty.

    Older tables spell the same column several ways (``HOLIDAYDATE``,
    ``holidaydate``, ``holiday_date`` ...); rows are read through this helper
    once, when they are mapped into domain objects.
    """
    for key in keys:
        value = row.get(key)
        if value is not None and value != "":
            return value
    return None


def coerce_flag(value: Any) -> bool:
    """Read booleans stored as bool, 1/0 or 'true'/'1'/'yes' text."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value == 1
    if isinstance(value, (bytes, bytearray)):
        value = value.decode(errors="ignore")
    return str(value).strip().lower() in {"true", "1", "yes"}


def normalize_mysql_time(value: Any) -> Optional[str]:
    """Normalize MySQL TIME/DATETIME values to ``HH:MM``.

    mysql-connector can return TIME as:
    - datetime.time
    - datetime.timedelta
    - string (e.g. '08:30:00')
    """

    if value is None:
        return None
    return extract_time(value) or None


def normalize_mysql_date(value: Any) -> Optional[str]:
    """Normalize DATE/DATETIME/string values to ``YYYY-MM-DD`` without timezone shifts."""
    return extract_date(value) or None
