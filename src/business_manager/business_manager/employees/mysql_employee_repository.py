from __future__ import annotations

from typing import Sequence

from ..database.adapters import normalize_employee
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, emp_id, name, salary, daily_wage, last_bonus_paid
                FROM employees
                ORDER BY name
                """
            )
            return [normalize_employee(r) for r in fetchall(cur)]
