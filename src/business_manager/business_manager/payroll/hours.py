from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import MINUTES_PER_DAY
from .time_parser import TimeOfDay, parse_time

logger = logging.getLogger(__name__)


def minutes_between(check_in: TimeOfDay, check_out: TimeOfDay) -> int:
    """Minutes from check-in to check-out; an earlier check-out is read as next day."""
    in_minutes = check_in.minutes_since_midnight
    out_minutes = check_out.minutes_since_midnight
    if out_minutes < in_minutes:
        out_minutes += MINUTES_PER_DAY
    return out_minutes - in_minutes


def calculate_total_hours(
    check_in: Optional[str],
    check_out: Optional[str],
    *,
    max_shift_hours: Optional[float] = None,
) -> float:
    """Hours between two clock strings, never negative.

    ``max_shift_hours`` caps how long a span may be before it is treated as a
    data error (0 hours) instead of a real shift. Unset means no cap.
    """
    in_time = parse_time(check_in)
    out_time = parse_time(check_out)
    if in_time is None or out_time is None:
        return 0.0

    hours = max(0.0, minutes_between(in_time, out_time) / 60.0)

    if max_shift_hours is not None and hours > max_shift_hours:
        logger.warning(
            "Shift %s -> %s spans %.2f hours (limit %.2f); counting 0 hours",
            check_in,
            check_out,
            hours,
            max_shift_hours,
        )
        return 0.0
    return hours
