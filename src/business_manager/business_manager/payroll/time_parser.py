"""Best-effort parsing of hand-entered clock times.

Attendance times are typed in by people, in 12-hour (``"08:30 PM"``) or
24-hour (``"20:30"``) form, and the history is full of blanks and ``--:--``
placeholders. Nothing here raises: anything unusable comes back as ``None``
so the day simply contributes no hours.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from ..core.constants import NO_TIME_SENTINEL

logger = logging.getLogger(__name__)

_MERIDIEM_RE = re.compile(r"^(?P<clock>.*?)\s*(?P<marker>AM|PM)$", re.IGNORECASE)


@dataclass(frozen=True)
class TimeOfDay:
    hour: int
    minute: int

    @property
    def minutes_since_midnight(self) -> int:
        return self.hour * 60 + self.minute


def _split_clock(clock: str) -> tuple[int, int]:
    parts = clock.strip().split(":")
    hour = int(parts[0])
    minute = int(parts[1]) if len(parts) > 1 and parts[1].strip() else 0
    return hour, minute


def parse_time(raw: Optional[str]) -> Optional[TimeOfDay]:
    """Parse ``raw`` into a TimeOfDay, or None for blank/sentinel/malformed input."""
    if raw is None:
        return None

    text = str(raw).strip()
    if not text or text == NO_TIME_SENTINEL:
        return None

    match = _MERIDIEM_RE.match(text)
    clock = match.group("clock") if match else text

    try:
        hour, minute = _split_clock(clock)
    except ValueError:
        logger.warning("Could not parse time %r; treating it as missing", raw)
        return None

    if match:
        marker = match.group("marker").upper()
        if marker == "PM" and hour != 12:
            hour += 12
        elif marker == "AM" and hour == 12:
            hour = 0

    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        logger.warning("Time %r is out of range; treating it as missing", raw)
        return None

    return TimeOfDay(hour=hour, minute=minute)
