from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

from ..core.constants import ISO_DATE_FORMAT, MONTH_KEY_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), ISO_DATE_FORMAT).date()
    except ValueError:
        raise ValidationError("Data non valida (AAAA-MM-GG)")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_month_key(value: str) -> date:
    """Parse a YYYY-MM month key into the first day of that month."""
    try:
        return datetime.strptime((value or "").strip(), MONTH_KEY_FORMAT).date()
    except ValueError:
        raise ValidationError("Mese non valido (AAAA-MM)")


def month_key_for(day: date) -> str:
    return day.strftime(MONTH_KEY_FORMAT)


def month_bounds(month_key: str) -> tuple[date, date]:
    first = parse_month_key(month_key)
    last_day = calendar.monthrange(first.year, first.month)[1]
    return first, first.replace(day=last_day)


def month_days(month_key: str) -> list[date]:
    """All calendar days of the month, in order."""
    start, end = month_bounds(month_key)
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def is_weekday(day: date) -> bool:
    return day.weekday() < 5
