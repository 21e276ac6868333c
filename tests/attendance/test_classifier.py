from src.dtr_system.dtr_system.attendance.classifier import DailyPunchClassifier
from src.dtr_system.dtr_system.attendance.model import NormalizedPunch
from src.dtr_system.dtr_system.shifts.model import CheckpointDefinition, ShiftSchedule
from src.dtr_system.dtr_system.shifts.windows import resolve_windows


def _p(hhmm: str) -> NormalizedPunch:
    h, m = hhmm.split(":")
    return NormalizedPunch(punch_date="2025-01-06", punch_time=hhmm, minutes=int(h) * 60 + int(m))


FULL_DAY = ShiftSchedule(
    shift_name="Regular",
    am_checkin=CheckpointDefinition("08:00", "07:30", "08:30"),
    am_checkout=CheckpointDefinition("12:00", "11:30", "12:30"),
    pm_checkin=CheckpointDefinition("13:00", "12:31", "14:00"),
    pm_checkout=CheckpointDefinition("17:00", "16:30", "18:00"),
)


def test_earliest_for_checkins_and_am_checkout_latest_for_pm_checkout():
    punches = [_p("17:45"), _p("08:20"), _p("07:50"), _p("12:10"), _p("11:55"), _p("13:30"), _p("12:50"), _p("16:40")]

    sel = DailyPunchClassifier().classify(punches, resolve_windows(FULL_DAY))

    assert sel.am_checkin == "07:50"
    assert sel.am_checkout == "11:55"
    assert sel.pm_checkin == "12:50"
    assert sel.pm_checkout == "17:45"


def test_punches_outside_every_window_select_nothing():
    sel = DailyPunchClassifier().classify([_p("06:00"), _p("10:00"), _p("19:00")], resolve_windows(FULL_DAY))

    assert sel.am_checkin is None
    assert sel.am_checkout is None
    assert sel.pm_checkin is None
    assert sel.pm_checkout is None


def test_overlapping_windows_may_select_the_same_punch():
    schedule = ShiftSchedule(
        am_checkout=CheckpointDefinition("12:00", "11:30", "13:00"),
        pm_checkin=CheckpointDefinition("13:00", "12:30", "13:30"),
    )

    sel = DailyPunchClassifier().classify([_p("12:45")], resolve_windows(schedule))

    assert sel.am_checkout == "12:45"
    assert sel.pm_checkin == "12:45"


def test_inactive_checkpoint_never_selects_even_with_window():
    schedule = ShiftSchedule(
        am_checkin=CheckpointDefinition("08:00", "07:30", "08:30"),
        pm_checkin=CheckpointDefinition(None, "12:31", "14:00"),
    )

    sel = DailyPunchClassifier().classify([_p("08:00"), _p("13:00")], resolve_windows(schedule))

    assert sel.am_checkin == "08:00"
    assert sel.pm_checkin is None


def test_fallback_windows_apply_when_shift_has_no_windows():
    schedule = ShiftSchedule(
        am_checkin=CheckpointDefinition("08:00"),
        pm_checkout=CheckpointDefinition("17:00"),
    )

    sel = DailyPunchClassifier().classify([_p("04:00"), _p("06:30"), _p("14:01"), _p("23:59")], resolve_windows(schedule))

    assert sel.am_checkin == "04:00"
    assert sel.pm_checkout == "23:59"
