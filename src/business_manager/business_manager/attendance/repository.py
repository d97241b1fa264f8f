from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_employee_and_date_range(
        self,
        employee_id: str,
        start_date: date,
        end_date: date,
    ) -> Sequence[AttendanceRecord]:
        """Records of one employee with ``start_date <= work_date <= end_date``.

        An unknown ``employee_id`` yields an empty sequence, not an error.
        """

        raise NotImplementedError
