from src.dtr_system.dtr_system.core.enums import ShiftTimeMode
from src.dtr_system.dtr_system.shifts.merge import merge_assigned_shifts
from src.dtr_system.dtr_system.shifts.model import ShiftType


def _shift(shift_id, name, mode, cin, cout):
    return ShiftType(
        shift_id=shift_id,
        shift_name=name,
        time_mode=mode,
        checkin=cin,
        checkin_start=None,
        checkin_end=None,
        checkout=cout,
        checkout_start=None,
        checkout_end=None,
    )


def test_no_assignments_gives_no_schedule():
    assert merge_assigned_shifts([]) is None


def test_am_and_pm_assignments_are_combined():
    am = _shift(1, "Morning", ShiftTimeMode.AM, "08:00", "12:00")
    pm = _shift(2, "Afternoon", ShiftTimeMode.PM, "13:00", "17:00")

    schedule = merge_assigned_shifts([am, pm])

    assert schedule.shift_name == "Morning / Afternoon"
    assert schedule.am_checkin.expected == "08:00"
    assert schedule.am_checkout.expected == "12:00"
    assert schedule.pm_checkin.expected == "13:00"
    assert schedule.pm_checkout.expected == "17:00"


def test_first_am_bearing_assignment_wins():
    ampm = _shift(1, "Regular", ShiftTimeMode.AMPM, "07:00", "16:00")
    am = _shift(2, "Morning", ShiftTimeMode.AM, "08:00", "12:00")

    schedule = merge_assigned_shifts([ampm, am, ampm])

    assert schedule.shift_name == "Regular / Morning"
    assert schedule.am_checkin.expected == "07:00"
    assert schedule.pm_checkin.expected == "07:00"
    assert schedule.pm_checkout.expected == "16:00"


def test_am_only_assignment_leaves_pm_inactive():
    schedule = merge_assigned_shifts([_shift(1, "Half", ShiftTimeMode.AM, "08:00", "12:00")])

    assert schedule.has_active_checkpoint
    assert not schedule.pm_checkin.active
    assert not schedule.pm_checkout.active
    assert schedule.to_dict()["SHIFT_PMCHECKIN"] is None
    assert schedule.to_dict()["SHIFT_AMCHECKIN"] == "08:00"


def test_parse_time_mode():
    assert ShiftTimeMode.parse(" ampm ") == ShiftTimeMode.AMPM
    assert ShiftTimeMode.parse("PM") == ShiftTimeMode.PM
    assert ShiftTimeMode.parse(None) is None
    assert ShiftTimeMode.parse("") is None
    assert ShiftTimeMode.parse("OT") is None


def test_shift_without_mode_adds_no_checkpoints_but_keeps_its_name():
    blank = _shift(1, "Flexi", None, "07:00", "16:00")
    pm = _shift(2, "Afternoon", ShiftTimeMode.PM, "13:00", "17:00")

    schedule = merge_assigned_shifts([blank, pm])

    assert schedule.shift_name == "Flexi / Afternoon"
    assert not schedule.am_checkin.active
    assert not schedule.am_checkout.active
    assert schedule.pm_checkin.expected == "13:00"


def test_only_modeless_shifts_leave_nothing_active():
    schedule = merge_assigned_shifts([_shift(1, "Flexi", None, "07:00", "16:00")])

    assert schedule is not None
    assert not schedule.has_active_checkpoint
