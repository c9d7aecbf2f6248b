"""Clock-time codec: ``"H:MM"`` wall-clock strings <-> fractional hours.

Parsing never raises. Anything that is not a well formed ``H:MM`` / ``HH:MM``
time of day (empty, non-numeric parts, wrong number of parts, minutes >= 60,
hours >= 24) decodes to ``None`` and counts as "not set".
"""

from __future__ import annotations

import math
from typing import Optional

from ..core.constants import MINUTES_PER_HOUR


def parse_clock_minutes(value: Optional[str]) -> Optional[int]:
    """Minutes since midnight, or None when the value is absent or malformed."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None

    parts = text.split(":")
    if len(parts) != 2:
        return None
    hours_s, minutes_s = (p.strip() for p in parts)
    if not hours_s.isdecimal() or not minutes_s.isdecimal():
        return None

    hours = int(hours_s)
    minutes = int(minutes_s)
    if hours > 23 or minutes >= MINUTES_PER_HOUR:
        return None
    return hours * MINUTES_PER_HOUR + minutes


def parse_clock_time(value: Optional[str]) -> Optional[float]:
    """Decimal hours (``"8:30"`` -> ``8.5``), or None when absent/malformed."""
    minutes = parse_clock_minutes(value)
    if minutes is None:
        return None
    return minutes / MINUTES_PER_HOUR


def is_valid_clock_time(value: Optional[str]) -> bool:
    return parse_clock_minutes(value) is not None


def format_hours_to_clock(value: float) -> str:
    """Format decimal hours as ``H:MM`` (hour not zero-padded).

    Minutes are rounded half up; a rounding carry to 60 rolls into the hour.
    """
    hours = math.floor(value)
    minutes = int(math.floor((value - hours) * MINUTES_PER_HOUR + 0.5))
    if minutes == MINUTES_PER_HOUR:
        hours += 1
        minutes = 0
    return f"{int(hours)}:{minutes:02d}"
