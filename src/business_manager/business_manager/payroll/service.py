from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.validators import require_bonus_rate, require_valid_period
from ..core.constants import DEFAULT_BONUS_RATE_PERCENT, DEFAULT_EXCEPTION_HOURS_PER_DAY
from ..core.exceptions import DataSourceError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .bonus import bonus_for_employee
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import BonusReport, WageReport
from .wages import wage_for_employee

logger = logging.getLogger(__name__)


class PayrollService:
    """Fetch employees and attendance, then run the wage/bonus calculators.

    Reads only. A failed read aborts the whole batch with DataSourceError so
    partial payroll figures are never returned as if complete.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        exception_hours_per_day: float = DEFAULT_EXCEPTION_HOURS_PER_DAY,
        default_bonus_rate_percent: float = DEFAULT_BONUS_RATE_PERCENT,
    ):
        self._employees = employees
        self._attendance = attendance
        self._calculator = calculator or StandardPayrollCalculator()
        self._exception_hours_per_day = float(exception_hours_per_day)
        self._default_bonus_rate_percent = float(default_bonus_rate_percent)

    def list_employees(self) -> Sequence[Employee]:
        try:
            return list(self._employees.get_all())
        except DataSourceError:
            logger.exception("Could not load employees")
            raise

    def _select_employees(self, employee_id: Optional[str]) -> list[Employee]:
        employees = self.list_employees()
        if not employee_id:
            return employees
        return [e for e in employees if employee_id in (e.employee_id, e.record_id)]

    def _fetch_records(
        self, employees: Sequence[Employee], start: date, end: date
    ) -> list[tuple[Employee, list[AttendanceRecord]]]:
        """Pair each employee with the records the store returned for them.

        The store decides which rows belong to an employee; ids on the rows are
        not matched again here (collations may fold case).
        """
        batch: list[tuple[Employee, list[AttendanceRecord]]] = []
        for employee in employees:
            try:
                records = list(self._attendance.get_by_employee_and_date_range(employee.employee_id, start, end))
            except DataSourceError:
                logger.exception(
                    "Attendance fetch failed for employee %s (%s..%s); aborting batch",
                    employee.employee_id,
                    start,
                    end,
                )
                raise
            batch.append((employee, records))
        return batch

    def calculate_wages(self, *, start: date, end: date, employee_id: Optional[str] = None) -> WageReport:
        require_valid_period(start, end)
        employees = self._select_employees(employee_id)
        logger.info("Calculating wages for %d employee(s), %s..%s", len(employees), start, end)

        results = [
            wage_for_employee(
                employee,
                records,
                start,
                end,
                calculator=self._calculator,
                exception_hours_per_day=self._exception_hours_per_day,
            )
            for employee, records in self._fetch_records(employees, start, end)
        ]
        return WageReport(period_start=start, period_end=end, results=results)

    def calculate_bonus(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[str] = None,
        bonus_rate_percent: Optional[float | str] = None,
    ) -> BonusReport:
        require_valid_period(start, end)
        rate = require_bonus_rate(
            self._default_bonus_rate_percent if bonus_rate_percent is None else bonus_rate_percent
        )
        employees = self._select_employees(employee_id)
        logger.info("Calculating bonus at %.2f%% for %d employee(s), %s..%s", rate, len(employees), start, end)

        results = [
            bonus_for_employee(
                employee,
                records,
                start,
                end,
                rate,
                calculator=self._calculator,
                exception_hours_per_day=self._exception_hours_per_day,
            )
            for employee, records in self._fetch_records(employees, start, end)
        ]
        return BonusReport(period_start=start, period_end=end, bonus_rate_percent=rate, results=results)
