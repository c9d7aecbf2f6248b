from datetime import date

from src.timesheet.timesheet.accounting.aggregator import PeriodAggregator
from src.timesheet.timesheet.accounting.model import AccountingPolicy
from src.timesheet.timesheet.attendance.model import AttendanceRecord
from src.timesheet.timesheet.reports.projection import (
    SPREADSHEET_COLUMNS,
    build_printable,
    build_spreadsheet_rows,
    build_summary,
    long_date_label,
)


def _june(records=()):
    return PeriodAggregator().compute_month("2026-06", records, 8)


def _sample():
    return [
        AttendanceRecord(1, date(2026, 6, 1), "09:00", "13:00", "14:00", "19:00"),
        AttendanceRecord(1, date(2026, 6, 2), "08:00", "12:20", notes="visita medica"),
        AttendanceRecord(1, date(2026, 6, 3), is_vacation=True),
    ]


def test_summary_rows_use_clock_strings():
    view = build_summary(_june(_sample()))
    first = view.rows[0]
    assert first["label"] == "01/06"
    assert first["day_name"] == "lun"
    assert first["total"] == "9:00"
    assert first["overtime"] == "1:00"
    assert first["shortfall"] == "0:00"
    assert view.rows[1]["notes"] == "visita medica"
    assert view.totals["vacation"] == "8:00"
    assert view.totals["worked_day_count"] == 3


def test_spreadsheet_rows_have_decimals_and_total_row():
    rows = build_spreadsheet_rows(_june(_sample()))
    assert len(rows) == 31
    assert list(rows[0]) == SPREADSHEET_COLUMNS

    second = rows[1]
    assert second["Data"] == "02/06"
    assert second["Giorno"] == "mar"
    assert second["Ore Totali"] == 4.33
    assert second["Permesso"] == 3.67

    total = rows[-1]
    assert total["Data"] == "TOTALE"
    assert total["Ore Totali"] == 13.33
    assert total["Straordinario"] == 1
    assert total["Ferie"] == 8


def test_long_date_label_is_italian():
    assert long_date_label(date(2026, 6, 1)) == "lunedì, 1 giugno 2026"
    assert long_date_label(date(2026, 12, 27)) == "domenica, 27 dicembre 2026"


def test_printable_blanks_zero_cells():
    report = build_printable(_june(_sample()), AccountingPolicy(8, 8))
    first, second, third, fourth = report.rows[:4]
    assert first == {"Data": "lunedì, 1 giugno 2026", "Totale": "9:00", "Straord.": "1:00", "Ferie": "", "Permessi": ""}
    assert second["Permessi"] == "3:40"
    assert third["Ferie"] == "8:00"
    assert fourth["Totale"] == ""
    assert report.total_row["Data"] == "Sommatoria"
    assert report.total_row["Totale"] == "13:20"


def test_printable_without_implicit_vacation_counts_nothing_for_empty_month():
    report = build_printable(_june(), AccountingPolicy(8, 8))
    assert report.total_row["Ferie"] == "0:00"
    assert report.worked_day_count == 0
    assert report.standard_hours_baseline == 0


def test_printable_implicit_vacation_credits_weekdays_without_records():
    report = build_printable(_june(), AccountingPolicy(8, 8, absent_day_implicit_vacation=True))
    assert report.total_row["Ferie"] == "176:00"
    assert report.worked_day_count == 22
    assert report.standard_hours_baseline == 176
    assert report.standard_hours_baseline_label == "176:00"
    # weekends stay blank
    assert report.rows[5]["Ferie"] == ""


def test_printable_override_beats_policy_flag():
    period = _june([AttendanceRecord(1, date(2026, 6, 1), "09:00", "13:00", "14:00", "18:00")])
    report = build_printable(period, AccountingPolicy(8, 8), absent_day_implicit_vacation=True)
    assert report.total_row["Ferie"] == "168:00"
    assert report.worked_day_count == 22

    report = build_printable(
        period, AccountingPolicy(8, 8, absent_day_implicit_vacation=True), absent_day_implicit_vacation=False
    )
    assert report.total_row["Ferie"] == "0:00"
    assert report.worked_day_count == 1


def test_implicit_vacation_does_not_touch_core_totals():
    period = _june()
    build_printable(period, AccountingPolicy(8, 8, absent_day_implicit_vacation=True))
    assert period.totals.vacation_hours == 0


def test_baseline_uses_standard_daily_hours():
    report = build_printable(_june(_sample()), AccountingPolicy(threshold_hours=8, standard_daily_hours=7.5))
    assert report.worked_day_count == 3
    assert report.standard_hours_baseline == 22.5
    assert report.standard_hours_baseline_label == "22:30"
