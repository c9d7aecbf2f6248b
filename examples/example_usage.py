"""Example: month accounting without Flask or a database.

Controllers are a thin layer; the numbers come from the aggregator and the
report projection, which only need records and an AccountingPolicy.
"""

from datetime import date

from src.timesheet.timesheet.accounting.aggregator import PeriodAggregator
from src.timesheet.timesheet.accounting.model import AccountingPolicy
from src.timesheet.timesheet.attendance.model import AttendanceRecord
from src.timesheet.timesheet.reports.projection import build_printable, build_spreadsheet_rows


def main():
    policy = AccountingPolicy(threshold_hours=8, standard_daily_hours=8)
    records = [
        AttendanceRecord(1, date(2026, 6, 1), "09:00", "13:00", "14:00", "19:00"),
        AttendanceRecord(1, date(2026, 6, 2), "09:00", "12:00"),
        AttendanceRecord(1, date(2026, 6, 3), is_vacation=True, notes="ferie"),
    ]

    period = PeriodAggregator().compute_month("2026-06", records, policy.threshold_hours)
    print(build_spreadsheet_rows(period)[-1])

    report = build_printable(period, policy)
    print(report.total_row, report.worked_day_count, report.standard_hours_baseline_label)


if __name__ == "__main__":
    main()
