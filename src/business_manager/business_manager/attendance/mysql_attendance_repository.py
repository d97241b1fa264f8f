from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.adapters import normalize_attendance
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_employee_and_date_range(
        self,
        employee_id: str,
        start_date: date,
        end_date: date,
    ) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, work_date, check_in_time, check_out_time,
                       working_hours, status, notes
                FROM attendance_records
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date, id
                """,
                (str(employee_id), start_date, end_date),
            )
            return [normalize_attendance(r) for r in fetchall(cur)]
