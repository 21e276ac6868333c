from datetime import date, datetime, time, timedelta

from src.dtr_system.dtr_system.common.datetime_utils import (
    extract_date,
    extract_time,
    is_weekend,
    iter_dates,
    normalize_timestamp,
    time_to_minutes,
)


def test_iso_timestamp_is_read_literally_without_timezone_shift():
    assert normalize_timestamp("2025-01-06T23:50:00.000Z") == ("2025-01-06", "23:50")
    assert normalize_timestamp("2025-01-06T00:10:00+08:00") == ("2025-01-06", "00:10")


def test_space_separated_timestamp():
    assert normalize_timestamp("2025-01-06 08:05:59") == ("2025-01-06", "08:05")


def test_datetime_objects_use_their_wall_clock_fields():
    assert normalize_timestamp(datetime(2025, 1, 6, 7, 45, 30)) == ("2025-01-06", "07:45")


def test_unmatched_date_portion_yields_nothing():
    assert extract_date("06/01/2025 08:00") == ""
    assert normalize_timestamp("06/01/2025 08:00") is None
    assert normalize_timestamp("garbage") is None
    assert normalize_timestamp(None) is None


def test_date_only_value_has_no_time():
    assert extract_date("2025-01-06") == "2025-01-06"
    assert extract_time("2025-01-06") == ""
    assert normalize_timestamp("2025-01-06") is None


def test_extract_time_from_mysql_time_values():
    assert extract_time(time(13, 5)) == "13:05"
    assert extract_time(timedelta(hours=17, minutes=30)) == "17:30"
    assert extract_time("08:00") == "08:00"
    assert extract_time("08:00:00") == "08:00"


def test_time_to_minutes():
    assert time_to_minutes("00:00") == 0
    assert time_to_minutes("12:31") == 751
    assert time_to_minutes("23:59") == 1439
    assert time_to_minutes("25:00") is None
    assert time_to_minutes("") is None


def test_iter_dates_is_inclusive_and_crosses_month_end():
    days = list(iter_dates(date(2024, 2, 27), date(2024, 3, 1)))
    assert days == [date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]
    assert list(iter_dates(date(2025, 1, 2), date(2025, 1, 1))) == []


def test_is_weekend():
    assert is_weekend(date(2025, 1, 11))  # Saturday
    assert is_weekend(date(2025, 1, 12))  # Sunday
    assert not is_weekend(date(2025, 1, 13))
