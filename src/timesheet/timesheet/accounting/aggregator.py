from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import month_days
from ..core.exceptions import ValidationError
from .calculator.base import DayCalculator
from .calculator.two_shift_calculator import TwoShiftCalculator
from .model import DayAccounting, PeriodAccounting, require_hours_setting, sum_days


def index_by_date(records: Iterable[AttendanceRecord]) -> dict[date, AttendanceRecord]:
    """Key records by work date. A later record for the same date wins."""
    return {r.work_date: r for r in records}


class PeriodAggregator:
    """Single entry point for every consumer that needs hour buckets.

    Live editor, month closure, spreadsheet export and printable report all go
    through here so they cannot drift apart.
    """

    def __init__(self, calculator: Optional[DayCalculator] = None):
        self._calculator = calculator or TwoShiftCalculator()

    def compute_day(
        self,
        record: Optional[AttendanceRecord],
        threshold_hours: float,
        *,
        work_date: Optional[date] = None,
    ) -> DayAccounting:
        if work_date is None:
            if record is None:
                raise ValidationError("Data mancante per un giorno senza registrazione")
            work_date = record.work_date
        return self._calculator.compute_day(record, threshold_hours, work_date=work_date)

    def compute_period(
        self,
        days: Sequence[date],
        records_by_date: Mapping[date, AttendanceRecord],
        threshold_hours: float,
    ) -> PeriodAccounting:
        if days is None:
            raise ValidationError("Sequenza di giorni mancante")
        threshold = require_hours_setting(threshold_hours, "THRESHOLD_HOURS")
        records_by_date = records_by_date or {}

        out = tuple(
            self._calculator.compute_day(records_by_date.get(d), threshold, work_date=d) for d in days
        )
        return PeriodAccounting(
            days=out,
            totals=sum_days(out),
            worked_day_count=sum(1 for d in out if d.is_worked),
        )

    def compute_month(
        self,
        month_key: str,
        records: Iterable[AttendanceRecord],
        threshold_hours: float,
    ) -> PeriodAccounting:
        return self.compute_period(month_days(month_key), index_by_date(records), threshold_hours)


_default = PeriodAggregator()


def compute_day(
    record: Optional[AttendanceRecord],
    threshold_hours: float,
    *,
    work_date: Optional[date] = None,
) -> DayAccounting:
    return _default.compute_day(record, threshold_hours, work_date=work_date)


def compute_period(
    days: Sequence[date],
    records_by_date: Mapping[date, AttendanceRecord],
    threshold_hours: float,
) -> PeriodAccounting:
    return _default.compute_period(days, records_by_date, threshold_hours)
