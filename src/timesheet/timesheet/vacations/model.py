from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..core.enums import VacationStatus


@dataclass(frozen=True)
class VacationRequest:
    """Entità di dominio: richiesta ferie (intervallo di date inclusivo)."""

    request_id: int
    user_id: int
    start_date: date
    end_date: date
    status: VacationStatus
    created_at: datetime
    full_name: Optional[str] = None

    def dates_within(self, start: date, end: date) -> list[date]:
        lo = max(self.start_date, start)
        hi = min(self.end_date, end)
        if hi < lo:
            return []
        return [lo + timedelta(days=i) for i in range((hi - lo).days + 1)]
