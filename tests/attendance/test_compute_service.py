from __future__ import annotations

from datetime import date

import pytest

from src.dtr_system.dtr_system.approvals.model import ExceptionRecord
from src.dtr_system.dtr_system.approvals.mysql_approval_repository import MySQLApprovalRepository
from src.dtr_system.dtr_system.attendance.model import ClockPunch
from src.dtr_system.dtr_system.attendance.service import AttendanceComputeService, ExceptionCounts
from src.dtr_system.dtr_system.core.enums import ComputeOutcome, ComputePeriod, ExceptionKind, ShiftTimeMode
from src.dtr_system.dtr_system.core.exceptions import NotFoundError, ValidationError
from src.dtr_system.dtr_system.shifts.model import ShiftType
from tests.attendance.fakes import (
    FakeConnectionFactory,
    InMemoryApprovals,
    InMemoryEmployees,
    InMemoryPunches,
    InMemoryShifts,
)

MORNING = ShiftType(
    shift_id=1,
    shift_name="Morning",
    time_mode=ShiftTimeMode.AM,
    checkin="08:00",
    checkin_start="07:30",
    checkin_end="08:30",
    checkout="12:00",
    checkout_start="11:30",
    checkout_end="12:30",
)

AFTERNOON = ShiftType(
    shift_id=2,
    shift_name="Afternoon",
    time_mode=ShiftTimeMode.PM,
    checkin="13:00",
    checkin_start="12:31",
    checkin_end="14:00",
    checkout="17:00",
    checkout_start="16:30",
    checkout_end="18:00",
)


def _service(*, punches=(), shifts=None, approvals=None):
    return AttendanceComputeService(
        InMemoryPunches(list(punches)),
        InMemoryEmployees({"101": "E-1"}),
        InMemoryShifts({"E-1": [MORNING, AFTERNOON]} if shifts is None else shifts),
        approvals or InMemoryApprovals(),
    )


def test_unknown_user_raises_not_found():
    with pytest.raises(NotFoundError):
        _service().calculate(dtr_user_id="999", start=date(2025, 1, 6), end=date(2025, 1, 6))


def test_reversed_range_is_rejected():
    with pytest.raises(ValidationError):
        _service().calculate(dtr_user_id="101", start=date(2025, 1, 7), end=date(2025, 1, 6))


def test_no_assigned_shift_is_reported_without_summary():
    result = _service(shifts={}).calculate(dtr_user_id="101", start=date(2025, 1, 6), end=date(2025, 1, 6))

    assert result.computation.outcome == ComputeOutcome.NO_SCHEDULE
    assert result.computation.summary is None
    body = result.to_dict()
    assert body["success"] is False
    assert body["outcome"] == "NO_SCHEDULE"
    assert body["data"]["dailyData"] == []


def test_merged_am_and_pm_shifts_give_full_day():
    punches = [
        ClockPunch(employee_id="101", timestamp="2025-01-06 08:10:00"),
        ClockPunch(employee_id="101", timestamp="2025-01-06 12:01:00"),
        ClockPunch(employee_id="101", timestamp="2025-01-06 13:00:00"),
        ClockPunch(employee_id="101", timestamp="2025-01-06 17:30:00"),
        ClockPunch(employee_id="202", timestamp="2025-01-06 08:00:00"),
    ]

    result = _service(punches=punches).calculate(dtr_user_id="101", start=date(2025, 1, 6), end=date(2025, 1, 7))

    body = result.to_dict()
    assert body["success"] is True
    assert body["logsCount"] == 4
    assert body["shiftSchedule"]["SHIFTNAME"] == "Morning / Afternoon"
    assert body["data"]["totalDays"] == 1.0
    assert body["data"]["totalLates"] == 10
    assert body["data"]["equivalentDaysDeducted"] == 0.02
    assert body["data"]["dailyData"][0]["dtruserid"] == "101"
    assert body["range"] == {"startDate": "2025-01-06", "endDate": "2025-01-07"}


def test_counts_only_include_approved_records():
    approvals = InMemoryApprovals(
        exceptions=[
            ExceptionRecord(ExceptionKind.TRAVEL, "E-1", "2025-01-06", "Approved"),
            ExceptionRecord(ExceptionKind.TRAVEL, "E-1", "2025-01-07", "Pending"),
            ExceptionRecord(ExceptionKind.LOCATOR, "E-1", "2025-01-07", "Approved"),
        ],
        leaves=2,
    )

    result = _service(approvals=approvals).calculate(dtr_user_id="101", start=date(2025, 1, 6), end=date(2025, 1, 7))

    counts = result.to_dict()["data"]
    assert counts["travelsCount"] == 1
    assert counts["locatorsCount"] == 1
    assert counts["leavesCount"] == 2
    assert counts["cdoCount"] == 0
    assert result.computation.summary.total_days == 2.0


def test_calculate_period_uses_half_month_range():
    result = _service().calculate_period(dtr_user_id="101", year=2025, month=2, period=ComputePeriod.SECOND)

    assert result.computation.start == date(2025, 2, 16)
    assert result.computation.end == date(2025, 2, 28)
    assert len(result.computation.days) == 13


def test_daily_records_match_the_computed_days():
    punches = [ClockPunch(employee_id="101", timestamp="2025-01-07 08:00:00")]
    service = _service(punches=punches)

    days = service.daily_records(dtr_user_id="101", start=date(2025, 1, 6), end=date(2025, 1, 8))
    full = service.calculate(dtr_user_id="101", start=date(2025, 1, 6), end=date(2025, 1, 8))

    assert days == full.computation.days
    assert [d.selections.am_checkin for d in days] == [None, "08:00", None]


def test_travel_count_is_per_order_not_per_date():
    records = [
        ExceptionRecord(ExceptionKind.TRAVEL, "E-1", "2025-01-06", "Approved", source_id="T-1"),
        ExceptionRecord(ExceptionKind.TRAVEL, "E-1", "2025-01-07", "Approved", source_id="T-1"),
        ExceptionRecord(ExceptionKind.TRAVEL, "E-1", "2025-01-08", "Approved", source_id="T-1"),
        ExceptionRecord(ExceptionKind.TRAVEL, "E-1", "2025-01-09", "Approved", source_id="T-2"),
        ExceptionRecord(ExceptionKind.CDO, "E-1", "2025-01-10", "Approved", source_id="C-1"),
    ]

    counts = ExceptionCounts.from_records(records)

    assert counts.travels == 2
    assert counts.cdo == 1


def test_multi_day_travel_order_credits_each_day_but_counts_once():
    approvals = InMemoryApprovals(
        exceptions=[
            ExceptionRecord(ExceptionKind.TRAVEL, "E-1", f"2025-01-0{n}", "Approved", source_id="T-9")
            for n in (6, 7, 8)
        ]
    )

    result = _service(approvals=approvals).calculate(dtr_user_id="101", start=date(2025, 1, 6), end=date(2025, 1, 8))

    assert result.computation.summary.total_days == 3.0
    assert result.to_dict()["data"]["travelsCount"] == 1


def test_travel_order_id_is_read_from_storage():
    conn = FakeConnectionFactory(
        [
            {"emp_objid": "E-1", "source_id": 41, "traveldate": "2025-01-06", "travelstatus": "Approved"},
            {"emp_objid": "E-1", "source_id": 41, "traveldate": "2025-01-07", "travelstatus": "Approved"},
        ],
        [],
        [],
        [],
    )

    records = MySQLApprovalRepository(conn).list_exceptions(employee_id="E-1", start=date(2025, 1, 1), end=date(2025, 1, 31))

    assert [(r.kind, r.date_key, r.source_id) for r in records] == [
        (ExceptionKind.TRAVEL, "2025-01-06", 41),
        (ExceptionKind.TRAVEL, "2025-01-07", 41),
    ]
    assert ExceptionCounts.from_records(records).travels == 1
