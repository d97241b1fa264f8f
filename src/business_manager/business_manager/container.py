from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .core.constants import DEFAULT_BONUS_RATE_PERCENT, DEFAULT_EXCEPTION_HOURS_PER_DAY
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.formatters import CURRENCY_SYMBOL
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository

    payroll_service: PayrollService
    currency_symbol: str = CURRENCY_SYMBOL


def build_container(
    *,
    db_config: dict,
    exception_hours_per_day: float = DEFAULT_EXCEPTION_HOURS_PER_DAY,
    bonus_rate_percent: float = DEFAULT_BONUS_RATE_PERCENT,
    max_shift_hours: Optional[float] = None,
    currency_symbol: str = CURRENCY_SYMBOL,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    payroll_service = PayrollService(
        employees_repo,
        attendance_repo,
        calculator=StandardPayrollCalculator(max_shift_hours=max_shift_hours),
        exception_hours_per_day=exception_hours_per_day,
        default_bonus_rate_percent=bonus_rate_percent,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        payroll_service=payroll_service,
        currency_symbol=currency_symbol,
    )
