from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import month_key_for, now_local, parse_month_key
from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..reports.service import MonthReportService
from .model import ClosureSubmission, MonthlyClosure
from .repository import ClosureRepository

logger = logging.getLogger(__name__)


class ClosureService:
    def __init__(self, closures: ClosureRepository, reports: MonthReportService):
        self._closures = closures
        self._reports = reports

    def submit(self, *, user_id: int, month_key: str, now: Optional[datetime] = None) -> ClosureSubmission:
        """Close a month: compute it and upsert the (user, month) marker.

        Re-submitting overwrites submitted_at only; the month is re-derived from
        the current records every time.
        """
        month_key = month_key_for(parse_month_key(month_key))
        now = now or now_local()

        period = self._reports.build_period(user_id=int(user_id), month_key=month_key)
        self._closures.upsert(user_id=int(user_id), month_key=month_key, submitted_at=now)
        logger.info(
            "Closure submitted: user=%s month=%s worked_days=%s",
            user_id,
            month_key,
            period.worked_day_count,
        )

        closure = self._closures.get(user_id=int(user_id), month_key=month_key)
        if not closure:
            raise ValidationError("Invio chiusura fallito")
        return ClosureSubmission(closure=closure, period=period)

    def is_closed(self, *, user_id: int, month_key: str) -> bool:
        month_key = month_key_for(parse_month_key(month_key))
        return self._closures.get(user_id=int(user_id), month_key=month_key) is not None

    def list_for_user(self, *, user_id: int) -> Sequence[MonthlyClosure]:
        return self._closures.list_for_user(user_id=int(user_id))

    def list_all(self, *, current_role: Role, month_key: Optional[str] = None) -> Sequence[MonthlyClosure]:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Non hai i permessi")
        if month_key:
            month_key = month_key_for(parse_month_key(month_key))
        return self._closures.list_all(month_key=month_key or None, limit=DEFAULT_LIST_LIMIT)

    @staticmethod
    def to_ui(closure: MonthlyClosure) -> dict:
        return {
            "user_id": closure.user_id,
            "full_name": closure.full_name or "-",
            "month_key": closure.month_key,
            "submitted_at": closure.submitted_at.strftime("%Y-%m-%d %H:%M"),
        }
