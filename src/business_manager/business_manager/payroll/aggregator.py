from __future__ import annotations

from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator


def sum_worked_hours(
    records: Iterable[AttendanceRecord],
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> float:
    """Total hours over ``records``; several records on one day are all counted."""
    calculator = calculator or StandardPayrollCalculator()
    return sum((calculator.worked_hours(r) for r in records), 0.0)
