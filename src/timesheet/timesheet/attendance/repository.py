from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def fetch_records(self, user_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Records for one user with start_date <= work_date <= end_date."""

        raise NotImplementedError

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, record: AttendanceRecord) -> int:
        """Create or replace the record keyed by (user_id, work_date).

        Returns record_id.
        """

        raise NotImplementedError
