from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from ...attendance.model import AttendanceRecord
from ..model import DayAccounting


class DayCalculator(ABC):
    """Calculator interface (Strategy Pattern for daily accounting)."""

    @abstractmethod
    def compute_day(self, record: Optional[AttendanceRecord], threshold_hours: float, *, work_date: date) -> DayAccounting:
        raise NotImplementedError
