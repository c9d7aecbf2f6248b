from __future__ import annotations

from datetime import date
from typing import Optional

from ...attendance.model import AttendanceRecord
from ...core.constants import MINUTES_PER_HOUR, VACATION_DAY_HOURS
from ..clock import parse_clock_minutes
from ..model import DayAccounting, require_hours_setting
from .base import DayCalculator


def _span_minutes(start: Optional[str], end: Optional[str]) -> int:
    """Length of one half-shift; 0 when either end is missing or the span is inverted."""
    start_m = parse_clock_minutes(start)
    end_m = parse_clock_minutes(end)
    if start_m is None or end_m is None:
        return 0
    return max(0, end_m - start_m)


class TwoShiftCalculator(DayCalculator):
    """Standard rule: morning span + afternoon span, classified against the threshold.

    A vacation day is always credited VACATION_DAY_HOURS and nothing else.
    A day with no worked time yields all zeros (no implicit vacation credit).
    """

    def compute_day(self, record: Optional[AttendanceRecord], threshold_hours: float, *, work_date: date) -> DayAccounting:
        threshold = require_hours_setting(threshold_hours, "THRESHOLD_HOURS")

        if record is None:
            return DayAccounting(work_date=work_date)

        notes = record.notes or ""
        if record.is_vacation:
            return DayAccounting(
                work_date=work_date,
                vacation_hours=float(VACATION_DAY_HOURS),
                has_record=True,
                is_vacation=True,
                notes=notes,
            )

        total_m = _span_minutes(record.morning_in, record.morning_out) + _span_minutes(
            record.afternoon_in, record.afternoon_out
        )
        threshold_m = threshold * MINUTES_PER_HOUR

        overtime_m = 0.0
        shortfall_m = 0.0
        if total_m == 0:
            pass
        elif total_m > threshold_m:
            overtime_m = total_m - threshold_m
        elif total_m < threshold_m:
            shortfall_m = threshold_m - total_m

        return DayAccounting(
            work_date=work_date,
            total_hours=total_m / MINUTES_PER_HOUR,
            overtime_hours=overtime_m / MINUTES_PER_HOUR,
            shortfall_hours=shortfall_m / MINUTES_PER_HOUR,
            has_record=True,
            notes=notes,
        )
