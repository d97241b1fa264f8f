from __future__ import annotations

from typing import Optional

from ...attendance.model import AttendanceRecord
from ...core.constants import STANDARD_WORKDAY_HOURS
from ...core.enums import AttendanceStatus
from ..hours import calculate_total_hours
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule, first match wins.

    1. check-in and check-out both set: span between them
    2. stored ``working_hours`` (non-zero): used as is
    3. status "present": a full workday
    4. otherwise 0
    """

    def __init__(
        self,
        *,
        max_shift_hours: Optional[float] = None,
        present_day_hours: float = STANDARD_WORKDAY_HOURS,
    ):
        self._max_shift_hours = max_shift_hours
        self._present_day_hours = float(present_day_hours)

    def worked_hours(self, record: AttendanceRecord) -> float:
        if record.has_times:
            return calculate_total_hours(
                record.check_in_time,
                record.check_out_time,
                max_shift_hours=self._max_shift_hours,
            )
        # 0 stored hours counts as "not recorded" and falls through to the status.
        if record.working_hours:
            return float(record.working_hours)
        if AttendanceStatus.is_present(record.status):
            return self._present_day_hours
        return 0.0
