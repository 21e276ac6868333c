from datetime import date

from src.dtr_system.dtr_system.core.enums import ComputePeriod
from src.dtr_system.dtr_system.payroll.periods import month_name, period_date_range


def test_first_half_is_days_one_to_fifteen():
    assert period_date_range(2025, 2, ComputePeriod.FIRST) == (date(2025, 2, 1), date(2025, 2, 15))


def test_second_half_runs_to_month_end():
    assert period_date_range(2025, 2, ComputePeriod.SECOND) == (date(2025, 2, 16), date(2025, 2, 28))
    assert period_date_range(2024, 2, ComputePeriod.SECOND) == (date(2024, 2, 16), date(2024, 2, 29))


def test_full_month():
    assert period_date_range(2025, 12, ComputePeriod.FULL) == (date(2025, 12, 1), date(2025, 12, 31))


def test_month_name_and_period_labels():
    assert month_name(1) == "January"
    assert ComputePeriod.FIRST.label == "1st Half"
    assert ComputePeriod.SECOND.label == "2nd Half"
    assert ComputePeriod.FULL.label == "Full Month"
