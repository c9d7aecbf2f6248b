from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Sequence

from ..core.exceptions import ConfigurationError


def require_hours_setting(value: Any, name: str) -> float:
    """Reject a missing or non-positive hours setting instead of assuming one."""
    if value is None or isinstance(value, bool):
        raise ConfigurationError(f"{name} non configurato")
    try:
        hours = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} non valido: {value!r}")
    if hours != hours or hours <= 0:
        raise ConfigurationError(f"{name} deve essere positivo: {value!r}")
    return hours


@dataclass(frozen=True)
class AccountingPolicy:
    """Business rules the embedding application must choose explicitly.

    - threshold_hours: daily hours above which time is overtime and below which
      it is shortfall.
    - standard_daily_hours: multiplier for the printable "ore standard" baseline.
    - absent_day_implicit_vacation: printable report only; credit a vacation
      day to weekdays that have no stored record.
    """

    threshold_hours: float
    standard_daily_hours: float
    absent_day_implicit_vacation: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "threshold_hours", require_hours_setting(self.threshold_hours, "THRESHOLD_HOURS"))
        object.__setattr__(
            self, "standard_daily_hours", require_hours_setting(self.standard_daily_hours, "STANDARD_DAILY_HOURS")
        )
        object.__setattr__(self, "absent_day_implicit_vacation", bool(self.absent_day_implicit_vacation))

    @classmethod
    def from_settings(cls, settings: Any) -> "AccountingPolicy":
        return cls(
            threshold_hours=getattr(settings, "THRESHOLD_HOURS", None),
            standard_daily_hours=getattr(settings, "STANDARD_DAILY_HOURS", None),
            absent_day_implicit_vacation=bool(getattr(settings, "ABSENT_DAY_IMPLICIT_VACATION", False)),
        )


@dataclass(frozen=True)
class DayAccounting:
    """Ore derivate per un singolo giorno (non persistite)."""

    work_date: date
    total_hours: float = 0.0
    overtime_hours: float = 0.0
    shortfall_hours: float = 0.0
    vacation_hours: float = 0.0
    has_record: bool = False
    is_vacation: bool = False
    notes: str = ""

    @property
    def is_worked(self) -> bool:
        return self.total_hours > 0 or self.vacation_hours > 0


@dataclass(frozen=True)
class AccountingTotals:
    total_hours: float = 0.0
    overtime_hours: float = 0.0
    shortfall_hours: float = 0.0
    vacation_hours: float = 0.0


@dataclass(frozen=True)
class PeriodAccounting:
    """Per-day accounting for a period (usually a month) plus its totals."""

    days: tuple[DayAccounting, ...]
    totals: AccountingTotals
    worked_day_count: int

    @property
    def start(self) -> Optional[date]:
        return self.days[0].work_date if self.days else None

    @property
    def end(self) -> Optional[date]:
        return self.days[-1].work_date if self.days else None

    def day(self, work_date: date) -> Optional[DayAccounting]:
        for d in self.days:
            if d.work_date == work_date:
                return d
        return None


def sum_days(days: Sequence[DayAccounting]) -> AccountingTotals:
    return AccountingTotals(
        total_hours=math.fsum(d.total_hours for d in days),
        overtime_hours=math.fsum(d.overtime_hours for d in days),
        shortfall_hours=math.fsum(d.shortfall_hours for d in days),
        vacation_hours=math.fsum(d.vacation_hours for d in days),
    )
