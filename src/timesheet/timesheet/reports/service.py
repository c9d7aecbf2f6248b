from __future__ import annotations

from typing import Optional

from ..accounting.aggregator import PeriodAggregator
from ..accounting.model import AccountingPolicy, PeriodAccounting
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds, month_days
from .projection import PrintableReport, SummaryView, build_printable, build_spreadsheet_rows, build_summary


class MonthReportService:
    """Fetch one user's month and project it for the summary/export consumers.

    Every shape is built from the same PeriodAccounting, re-derived on each call.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        policy: AccountingPolicy,
        *,
        aggregator: Optional[PeriodAggregator] = None,
    ):
        self._attendance = attendance
        self._policy = policy
        self._aggregator = aggregator or PeriodAggregator()

    @property
    def policy(self) -> AccountingPolicy:
        return self._policy

    def build_period(self, *, user_id: int, month_key: str) -> PeriodAccounting:
        start, end = month_bounds(month_key)
        records = self._attendance.fetch_records(int(user_id), start, end)
        by_date = {r.work_date: r for r in records if start <= r.work_date <= end}
        return self._aggregator.compute_period(month_days(month_key), by_date, self._policy.threshold_hours)

    def summary(self, *, user_id: int, month_key: str) -> SummaryView:
        return build_summary(self.build_period(user_id=user_id, month_key=month_key))

    def spreadsheet_rows(self, *, user_id: int, month_key: str) -> list[dict]:
        return build_spreadsheet_rows(self.build_period(user_id=user_id, month_key=month_key))

    def printable(
        self,
        *,
        user_id: int,
        month_key: str,
        absent_day_implicit_vacation: Optional[bool] = None,
    ) -> PrintableReport:
        period = self.build_period(user_id=user_id, month_key=month_key)
        return build_printable(period, self._policy, absent_day_implicit_vacation=absent_day_implicit_vacation)
