from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import DEFAULT_EXCEPTION_HOURS_PER_DAY, STANDARD_WORKDAY_HOURS
from ..employees.model import Employee
from .aggregator import sum_worked_hours
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .grouping import group_by_employee
from .model import WageCalculationResult


def wage_for_employee(
    employee: Employee,
    records: Sequence[AttendanceRecord],
    period_start: date,
    period_end: date,
    *,
    calculator: PayrollCalculator,
    exception_hours_per_day: float = DEFAULT_EXCEPTION_HOURS_PER_DAY,
) -> WageCalculationResult:
    total_hours = sum_worked_hours(records, calculator=calculator)
    # Flat deduction per attendance record, whether or not it yielded hours.
    exception_hours = exception_hours_per_day * len(records)
    effective_hours = max(0.0, total_hours - exception_hours)
    daily_wage = float(employee.daily_wage or 0.0)

    return WageCalculationResult(
        employee_id=employee.employee_id,
        employee_name=employee.name,
        total_hours=total_hours,
        exception_hours=exception_hours,
        effective_hours=effective_hours,
        daily_wage=daily_wage,
        calculated_wage=(effective_hours * daily_wage) / STANDARD_WORKDAY_HOURS,
        period_start=period_start,
        period_end=period_end,
        attendance_record_count=len(records),
    )


def calculate_wages(
    employees: Iterable[Employee],
    records: Iterable[AttendanceRecord],
    period_start: date,
    period_end: date,
    *,
    calculator: Optional[PayrollCalculator] = None,
    exception_hours_per_day: float = DEFAULT_EXCEPTION_HOURS_PER_DAY,
) -> list[WageCalculationResult]:
    """One result per employee, in the order given.

    ``records`` must already be restricted to the period; they are matched to
    employees by ``employee_id``. An employee without records gets a zero row.
    """
    calculator = calculator or StandardPayrollCalculator()
    by_employee = group_by_employee(records)
    return [
        wage_for_employee(
            employee,
            by_employee.get(employee.employee_id, []),
            period_start,
            period_end,
            calculator=calculator,
            exception_hours_per_day=exception_hours_per_day,
        )
        for employee in employees
    ]
