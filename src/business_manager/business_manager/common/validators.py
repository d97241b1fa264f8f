from __future__ import annotations

import math
from datetime import date

from ..core.exceptions import ValidationError


def require_valid_period(start: date, end: date) -> tuple[date, date]:
    if start > end:
        raise ValidationError(f"Period start {start.isoformat()} is after end {end.isoformat()}")
    return start, end


def require_bonus_rate(value) -> float:
    try:
        rate = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Bonus rate {value!r} is not a number") from exc
    if not math.isfinite(rate):
        raise ValidationError(f"Bonus rate {value!r} is not a finite number")
    if rate < 0:
        raise ValidationError("Bonus rate cannot be negative")
    return rate
