from __future__ import annotations

from datetime import date
from decimal import Decimal

from src.business_manager.business_manager.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.business_manager.business_manager.employees.mysql_employee_repository import MySQLEmployeeRepository


class RecordingCursor:
    def __init__(self, rows):
        self._rows = rows
        self.executed = []

    def execute(self, sql, params=None):
        self.executed.append((sql, params))

    def fetchall(self):
        return self._rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, rows):
        self.cursor = RecordingCursor(rows)

    def connect(self):
        return FakeConnection(self.cursor)


def test_attendance_query_is_bounded_by_employee_and_period():
    factory = FakeConnFactory(
        [
            {
                "employee_id": "E001",
                "work_date": date(2026, 1, 5),
                "check_in_time": "09:00",
                "check_out_time": "18:00",
                "working_hours": None,
                "status": "Present",
                "notes": None,
            }
        ]
    )
    repo = MySQLAttendanceRepository(factory)

    records = repo.get_by_employee_and_date_range("E001", date(2026, 1, 1), date(2026, 1, 31))

    [(sql, params)] = factory.cursor.executed
    assert "BETWEEN" in sql
    assert params == ("E001", date(2026, 1, 1), date(2026, 1, 31))
    assert len(records) == 1
    assert records[0].check_out_time == "18:00"


def test_unknown_employee_gives_empty_list():
    repo = MySQLAttendanceRepository(FakeConnFactory([]))

    assert repo.get_by_employee_and_date_range("nobody", date(2026, 1, 1), date(2026, 1, 31)) == []


def test_employees_are_normalized():
    factory = FakeConnFactory(
        [
            {"id": 1, "emp_id": "E001", "name": "Asha", "salary": Decimal("24000"), "daily_wage": Decimal("800"), "last_bonus_paid": None},
            {"id": 2, "emp_id": "E002", "name": "Ravi", "salary": Decimal("650"), "daily_wage": None, "last_bonus_paid": "2025-10-31"},
        ]
    )

    employees = MySQLEmployeeRepository(factory).get_all()

    assert [(e.employee_id, e.daily_wage) for e in employees] == [("E001", 800.0), ("E002", 650.0)]
    assert employees[0].record_id == "1"
