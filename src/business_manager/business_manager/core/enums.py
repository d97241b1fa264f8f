from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status values as entered on the attendance form."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"
    HALF_DAY = "Half Day"
    HOLIDAY = "Holiday"
    ON_LEAVE = "Leave"

    @classmethod
    def is_present(cls, value: str | None) -> bool:
        """True when a raw status string marks the employee as present."""
        if not value:
            return False
        return value.strip().lower() == cls.PRESENT.value.lower()
