from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import (
    DEFAULT_BONUS_RATE_PERCENT,
    DEFAULT_EXCEPTION_HOURS_PER_DAY,
    NEVER_PAID_LABEL,
    STANDARD_WORKDAY_HOURS,
)
from ..employees.model import Employee
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .grouping import group_by_employee
from .model import BonusCalculationResult


def earnings_for_records(
    records: Sequence[AttendanceRecord],
    daily_wage: float,
    *,
    calculator: PayrollCalculator,
    exception_hours_per_day: float = DEFAULT_EXCEPTION_HOURS_PER_DAY,
) -> float:
    """Sum of daily earnings, each day net of its own exception hours."""
    total = 0.0
    for record in records:
        effective_hours = max(0.0, calculator.worked_hours(record) - exception_hours_per_day)
        total += (effective_hours * daily_wage) / STANDARD_WORKDAY_HOURS
    return total


def bonus_for_employee(
    employee: Employee,
    records: Sequence[AttendanceRecord],
    period_start: date,
    period_end: date,
    bonus_rate_percent: float,
    *,
    calculator: PayrollCalculator,
    exception_hours_per_day: float = DEFAULT_EXCEPTION_HOURS_PER_DAY,
) -> BonusCalculationResult:
    total_earned = earnings_for_records(
        records,
        float(employee.daily_wage or 0.0),
        calculator=calculator,
        exception_hours_per_day=exception_hours_per_day,
    )
    return BonusCalculationResult(
        employee_id=employee.employee_id,
        employee_name=employee.name,
        total_earned=total_earned,
        bonus_rate_percent=bonus_rate_percent,
        bonus_amount=total_earned * bonus_rate_percent / 100,
        period_start=period_start,
        period_end=period_end,
        last_bonus_paid_label=employee.last_bonus_paid or NEVER_PAID_LABEL,
    )


def calculate_bonus(
    employees: Iterable[Employee],
    records: Iterable[AttendanceRecord],
    period_start: date,
    period_end: date,
    bonus_rate_percent: float = DEFAULT_BONUS_RATE_PERCENT,
    *,
    calculator: Optional[PayrollCalculator] = None,
    exception_hours_per_day: float = DEFAULT_EXCEPTION_HOURS_PER_DAY,
) -> list[BonusCalculationResult]:
    calculator = calculator or StandardPayrollCalculator()
    by_employee = group_by_employee(records)
    return [
        bonus_for_employee(
            employee,
            by_employee.get(employee.employee_id, []),
            period_start,
            period_end,
            bonus_rate_percent,
            calculator=calculator,
            exception_hours_per_day=exception_hours_per_day,
        )
        for employee in employees
    ]
