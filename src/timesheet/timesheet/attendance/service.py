from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..accounting.aggregator import PeriodAggregator
from ..accounting.clock import format_hours_to_clock
from ..accounting.model import AccountingPolicy, DayAccounting
from ..common.datetime_utils import month_bounds
from ..common.validators import require_clock_time
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayView:
    """Stored (or blank) record for a date plus its live accounting."""

    record: AttendanceRecord
    accounting: DayAccounting

    def to_ui(self) -> dict:
        r = self.record
        a = self.accounting
        return {
            "date": r.work_date.isoformat(),
            "morning_in": r.morning_in or "",
            "morning_out": r.morning_out or "",
            "afternoon_in": r.afternoon_in or "",
            "afternoon_out": r.afternoon_out or "",
            "is_vacation": r.is_vacation,
            "notes": r.notes,
            "stats": {
                "total": format_hours_to_clock(a.total_hours),
                "overtime": format_hours_to_clock(a.overtime_hours),
                "shortfall": format_hours_to_clock(a.shortfall_hours),
                "vacation": format_hours_to_clock(a.vacation_hours),
            },
        }


class AttendanceService:
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

    def _view(self, record: AttendanceRecord) -> DayView:
        accounting = self._aggregator.compute_day(record, self._policy.threshold_hours, work_date=record.work_date)
        return DayView(record=record, accounting=accounting)

    def get_day(self, user_id: int, work_date: date) -> DayView:
        record = self._attendance.get_for_user_and_date(int(user_id), work_date)
        return self._view(record or AttendanceRecord.blank(user_id=user_id, work_date=work_date))

    def save_day(
        self,
        *,
        user_id: int,
        work_date: date,
        morning_in: Optional[str] = None,
        morning_out: Optional[str] = None,
        afternoon_in: Optional[str] = None,
        afternoon_out: Optional[str] = None,
        is_vacation: bool = False,
        notes: Optional[str] = None,
    ) -> DayView:
        record = AttendanceRecord(
            user_id=int(user_id),
            work_date=work_date,
            morning_in=require_clock_time(morning_in, "Entrata mattina"),
            morning_out=require_clock_time(morning_out, "Uscita mattina"),
            afternoon_in=require_clock_time(afternoon_in, "Entrata pomeriggio"),
            afternoon_out=require_clock_time(afternoon_out, "Uscita pomeriggio"),
            is_vacation=bool(is_vacation),
            notes=(notes or "").strip(),
        )
        record_id = self._attendance.upsert(record)
        logger.info("Saved day %s for user %s (vacation=%s)", work_date.isoformat(), user_id, record.is_vacation)
        return self._view(replace(record, record_id=record_id))

    def mark_vacation(self, *, user_id: int, work_date: date) -> DayView:
        """Flag the whole day as vacation, keeping whatever clocks/notes are stored."""
        existing = self._attendance.get_for_user_and_date(int(user_id), work_date)
        base = existing or AttendanceRecord.blank(user_id=user_id, work_date=work_date)
        record = replace(base, is_vacation=True)
        record_id = self._attendance.upsert(record)
        logger.info("Marked %s as vacation for user %s", work_date.isoformat(), user_id)
        return self._view(replace(record, record_id=record_id))

    def list_month(self, user_id: int, month_key: str) -> list[AttendanceRecord]:
        start, end = month_bounds(month_key)
        records = self._attendance.fetch_records(int(user_id), start, end)
        return sorted(records, key=lambda r: r.work_date)
