from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..accounting.model import PeriodAccounting


@dataclass(frozen=True)
class MonthlyClosure:
    """Entità di dominio: chiusura mensile inviata da un dipendente."""

    user_id: int
    month_key: str
    submitted_at: datetime
    full_name: Optional[str] = None


@dataclass(frozen=True)
class ClosureSubmission:
    """Result of a submit: the stored marker plus the month it closes."""

    closure: MonthlyClosure
    period: PeriodAccounting
