"""Report projection: one PeriodAccounting, three output shapes.

- summary view (on-screen month table, ``H:MM`` strings)
- spreadsheet rows (Italian headers, decimals, trailing TOTALE row)
- printable report rows (long dates, blanks for zero, Sommatoria row,
  worked-day count and standard-hours baseline)

Rendering (layout, colors, file writing) happens elsewhere; these functions only
build rows.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..accounting.clock import format_hours_to_clock
from ..accounting.model import AccountingPolicy, AccountingTotals, DayAccounting, PeriodAccounting, sum_days
from ..common.datetime_utils import is_weekday
from ..core.constants import (
    ITALIAN_DAY_ABBREVIATIONS,
    ITALIAN_DAY_NAMES,
    ITALIAN_MONTH_NAMES,
    PRINTABLE_TOTAL_LABEL,
    SPREADSHEET_TOTAL_LABEL,
    VACATION_DAY_HOURS,
)

SPREADSHEET_COLUMNS = ["Data", "Giorno", "Ore Totali", "Straordinario", "Permesso", "Ferie", "Note"]
PRINTABLE_COLUMNS = ["Data", "Totale", "Straord.", "Ferie", "Permessi"]


@dataclass(frozen=True)
class SummaryView:
    rows: list[dict]
    totals: dict


@dataclass(frozen=True)
class PrintableReport:
    rows: list[dict]
    total_row: dict
    worked_day_count: int
    standard_daily_hours: float
    standard_hours_baseline: float

    @property
    def standard_hours_baseline_label(self) -> str:
        return format_hours_to_clock(self.standard_hours_baseline)


def short_date_label(day: date) -> str:
    return day.strftime("%d/%m")


def day_abbreviation(day: date) -> str:
    return ITALIAN_DAY_ABBREVIATIONS[day.weekday()]


def long_date_label(day: date) -> str:
    """``lunedì, 1 giugno 2026``"""
    return f"{ITALIAN_DAY_NAMES[day.weekday()]}, {day.day} {ITALIAN_MONTH_NAMES[day.month - 1]} {day.year}"


def _clock_or_blank(value: float) -> str:
    return format_hours_to_clock(value) if value > 0 else ""


def _totals_dict(totals: AccountingTotals) -> dict:
    return {
        "total": format_hours_to_clock(totals.total_hours),
        "overtime": format_hours_to_clock(totals.overtime_hours),
        "shortfall": format_hours_to_clock(totals.shortfall_hours),
        "vacation": format_hours_to_clock(totals.vacation_hours),
    }


def build_summary(period: PeriodAccounting) -> SummaryView:
    rows = [
        {
            "date": d.work_date.isoformat(),
            "label": short_date_label(d.work_date),
            "day_name": day_abbreviation(d.work_date),
            "total": format_hours_to_clock(d.total_hours),
            "overtime": format_hours_to_clock(d.overtime_hours),
            "shortfall": format_hours_to_clock(d.shortfall_hours),
            "vacation": format_hours_to_clock(d.vacation_hours),
            "is_vacation": d.is_vacation,
            "has_record": d.has_record,
            "notes": d.notes,
        }
        for d in period.days
    ]
    totals = _totals_dict(period.totals)
    totals["worked_day_count"] = period.worked_day_count
    return SummaryView(rows=rows, totals=totals)


def build_spreadsheet_rows(period: PeriodAccounting) -> list[dict]:
    rows = [
        {
            "Data": short_date_label(d.work_date),
            "Giorno": day_abbreviation(d.work_date),
            "Ore Totali": round(d.total_hours, 2),
            "Straordinario": round(d.overtime_hours, 2),
            "Permesso": round(d.shortfall_hours, 2),
            "Ferie": round(d.vacation_hours, 2),
            "Note": d.notes,
        }
        for d in period.days
    ]
    t = period.totals
    rows.append(
        {
            "Data": SPREADSHEET_TOTAL_LABEL,
            "Giorno": "",
            "Ore Totali": round(t.total_hours, 2),
            "Straordinario": round(t.overtime_hours, 2),
            "Permesso": round(t.shortfall_hours, 2),
            "Ferie": round(t.vacation_hours, 2),
            "Note": "",
        }
    )
    return rows


def apply_absent_day_vacation(period: PeriodAccounting) -> PeriodAccounting:
    """Credit a full vacation day to every weekday that has no stored record."""

    def credit(d: DayAccounting) -> DayAccounting:
        if d.has_record or not is_weekday(d.work_date):
            return d
        return replace(d, vacation_hours=float(VACATION_DAY_HOURS))

    days = tuple(credit(d) for d in period.days)
    return PeriodAccounting(
        days=days,
        totals=sum_days(days),
        worked_day_count=sum(1 for d in days if d.is_worked),
    )


def build_printable(
    period: PeriodAccounting,
    policy: AccountingPolicy,
    *,
    absent_day_implicit_vacation: Optional[bool] = None,
) -> PrintableReport:
    implicit = policy.absent_day_implicit_vacation if absent_day_implicit_vacation is None else absent_day_implicit_vacation
    if implicit:
        period = apply_absent_day_vacation(period)

    rows = [
        {
            "Data": long_date_label(d.work_date),
            "Totale": _clock_or_blank(d.total_hours),
            "Straord.": _clock_or_blank(d.overtime_hours),
            "Ferie": _clock_or_blank(d.vacation_hours),
            "Permessi": _clock_or_blank(d.shortfall_hours),
        }
        for d in period.days
    ]
    t = period.totals
    total_row = {
        "Data": PRINTABLE_TOTAL_LABEL,
        "Totale": format_hours_to_clock(t.total_hours),
        "Straord.": format_hours_to_clock(t.overtime_hours),
        "Ferie": format_hours_to_clock(t.vacation_hours),
        "Permessi": format_hours_to_clock(t.shortfall_hours),
    }
    return PrintableReport(
        rows=rows,
        total_row=total_row,
        worked_day_count=period.worked_day_count,
        standard_daily_hours=policy.standard_daily_hours,
        standard_hours_baseline=period.worked_day_count * policy.standard_daily_hours,
    )
