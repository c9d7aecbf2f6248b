from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Entità di dominio: presenza giornaliera (due turni, mattina e pomeriggio).

    Clock fields hold ``"HH:MM"`` strings, or None when not set. When
    ``is_vacation`` is true the clock fields may still be stored but are
    ignored by the accounting engine.
    """

    user_id: int
    work_date: date
    morning_in: Optional[str] = None
    morning_out: Optional[str] = None
    afternoon_in: Optional[str] = None
    afternoon_out: Optional[str] = None
    is_vacation: bool = False
    notes: str = ""
    record_id: Optional[int] = None

    @classmethod
    def blank(cls, *, user_id: int, work_date: date) -> "AttendanceRecord":
        return cls(user_id=int(user_id), work_date=work_date)
