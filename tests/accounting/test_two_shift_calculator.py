from datetime import date

import pytest

from src.timesheet.timesheet.accounting.calculator.two_shift_calculator import TwoShiftCalculator
from src.timesheet.timesheet.attendance.model import AttendanceRecord
from src.timesheet.timesheet.core.exceptions import ConfigurationError

DAY = date(2026, 6, 1)


def _record(**kwargs):
    return AttendanceRecord(user_id=1, work_date=DAY, **kwargs)


def test_long_day_is_overtime():
    acc = TwoShiftCalculator().compute_day(
        _record(morning_in="09:00", morning_out="13:00", afternoon_in="14:00", afternoon_out="19:00"),
        8,
        work_date=DAY,
    )
    assert acc.total_hours == 9
    assert acc.overtime_hours == 1
    assert acc.shortfall_hours == 0
    assert acc.vacation_hours == 0


def test_short_day_is_shortfall():
    acc = TwoShiftCalculator().compute_day(_record(morning_in="09:00", morning_out="12:00"), 8, work_date=DAY)
    assert acc.total_hours == 3
    assert acc.overtime_hours == 0
    assert acc.shortfall_hours == 5


def test_exact_threshold_has_no_overtime_or_shortfall():
    acc = TwoShiftCalculator().compute_day(
        _record(morning_in="08:10", morning_out="12:25", afternoon_in="13:05", afternoon_out="16:50"),
        8,
        work_date=DAY,
    )
    assert acc.total_hours == 8
    assert acc.overtime_hours == 0
    assert acc.shortfall_hours == 0


def test_fractional_threshold():
    acc = TwoShiftCalculator().compute_day(
        _record(morning_in="08:00", morning_out="12:00", afternoon_in="13:00", afternoon_out="17:00"),
        7.5,
        work_date=DAY,
    )
    assert acc.overtime_hours == pytest.approx(0.5)


def test_vacation_ignores_stray_clock_times():
    acc = TwoShiftCalculator().compute_day(
        _record(morning_in="09:00", morning_out="13:00", is_vacation=True, notes="ferie"),
        8,
        work_date=DAY,
    )
    assert acc.vacation_hours == 8
    assert acc.total_hours == 0
    assert acc.overtime_hours == 0
    assert acc.shortfall_hours == 0
    assert acc.is_vacation
    assert acc.notes == "ferie"


def test_incomplete_pair_contributes_nothing():
    acc = TwoShiftCalculator().compute_day(
        _record(morning_in="09:00", afternoon_in="14:00", afternoon_out="18:00"),
        8,
        work_date=DAY,
    )
    assert acc.total_hours == 4
    assert acc.shortfall_hours == 4


def test_inverted_span_counts_as_zero():
    acc = TwoShiftCalculator().compute_day(_record(morning_in="13:00", morning_out="09:00"), 8, work_date=DAY)
    assert acc.total_hours == 0
    assert acc.shortfall_hours == 0
    assert acc.has_record


def test_empty_record_is_all_zero():
    acc = TwoShiftCalculator().compute_day(_record(), 8, work_date=DAY)
    assert (acc.total_hours, acc.overtime_hours, acc.shortfall_hours, acc.vacation_hours) == (0, 0, 0, 0)
    assert not acc.is_worked


def test_missing_record_is_all_zero():
    acc = TwoShiftCalculator().compute_day(None, 8, work_date=DAY)
    assert acc.work_date == DAY
    assert not acc.has_record
    assert acc.vacation_hours == 0


def test_overtime_and_shortfall_are_exclusive():
    calc = TwoShiftCalculator()
    for out in ("10:00", "12:00", "16:00", "17:00", "18:30"):
        acc = calc.compute_day(_record(morning_in="09:00", morning_out=out), 8, work_date=DAY)
        assert acc.overtime_hours == 0 or acc.shortfall_hours == 0


@pytest.mark.parametrize("threshold", [None, 0, -1, "abc", True])
def test_threshold_must_be_configured(threshold):
    with pytest.raises(ConfigurationError):
        TwoShiftCalculator().compute_day(_record(morning_in="09:00", morning_out="12:00"), threshold, work_date=DAY)


def test_swapping_half_shifts_gives_same_result():
    calc = TwoShiftCalculator()
    a = calc.compute_day(
        _record(morning_in="08:00", morning_out="12:30", afternoon_in="13:15", afternoon_out="18:00"), 8, work_date=DAY
    )
    b = calc.compute_day(
        _record(morning_in="13:15", morning_out="18:00", afternoon_in="08:00", afternoon_out="12:30"), 8, work_date=DAY
    )
    assert a == b
    assert a.overtime_hours == pytest.approx(1.25)
