from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance entry of one employee on one day.

    Times are kept as the raw strings captured on the attendance form
    (``"09:00"``, ``"08:30 AM"``); they are only interpreted by payroll.
    """

    employee_id: str
    work_date: date
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    working_hours: Optional[float] = None
    status: str = ""
    note: Optional[str] = None

    @property
    def has_times(self) -> bool:
        return bool(self.check_in_time) and bool(self.check_out_time)
