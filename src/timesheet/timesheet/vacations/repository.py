from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import VacationStatus
from .model import VacationRequest


class VacationRepository(Protocol):
    def create(self, *, user_id: int, start_date: date, end_date: date) -> int:
        raise NotImplementedError

    def get(self, *, request_id: int) -> Optional[VacationRequest]:
        raise NotImplementedError

    def list_for_user(self, *, user_id: int, limit: int = 200) -> Sequence[VacationRequest]:
        raise NotImplementedError

    def list_overlapping(
        self,
        *,
        start_date: date,
        end_date: date,
        status: Optional[VacationStatus] = None,
    ) -> Sequence[VacationRequest]:
        """Requests whose [start_date, end_date] intersects the given range."""

        raise NotImplementedError

    def set_status(self, *, request_id: int, status: VacationStatus, expected: VacationStatus) -> bool:
        """Compare-and-set the status. Returns False when the current status differs."""

        raise NotImplementedError
