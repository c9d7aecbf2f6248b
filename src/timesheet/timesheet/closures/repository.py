from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import MonthlyClosure


class ClosureRepository(Protocol):
    def upsert(self, *, user_id: int, month_key: str, submitted_at: datetime) -> None:
        """Insert the (user_id, month_key) marker or overwrite its submitted_at."""

        raise NotImplementedError

    def get(self, *, user_id: int, month_key: str) -> Optional[MonthlyClosure]:
        raise NotImplementedError

    def list_for_user(self, *, user_id: int) -> Sequence[MonthlyClosure]:
        raise NotImplementedError

    def list_all(self, *, month_key: Optional[str] = None, limit: int = 200) -> Sequence[MonthlyClosure]:
        """Newest first, joined with the user's display name."""

        raise NotImplementedError
