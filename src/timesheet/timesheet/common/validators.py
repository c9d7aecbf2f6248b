from __future__ import annotations

from typing import Optional

from ..accounting.clock import is_valid_clock_time
from ..core.exceptions import ValidationError


def require_clock_time(value: Optional[str], field_name: str) -> Optional[str]:
    """Normalize an optional HH:MM field; blank means "not set"."""
    v = (value or "").strip()
    if not v:
        return None
    if not is_valid_clock_time(v):
        raise ValidationError(f"{field_name}: orario non valido (HH:MM)")
    hours, minutes = v.split(":")
    return f"{int(hours):02d}:{int(minutes):02d}"
