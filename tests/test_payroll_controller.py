from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pytest
from flask import Flask

from src.business_manager.business_manager.attendance.model import AttendanceRecord
from src.business_manager.business_manager.core.exceptions import DataSourceError
from src.business_manager.business_manager.employees.model import Employee
from src.business_manager.business_manager.payroll import controller as payroll_controller
from src.business_manager.business_manager.payroll.service import PayrollService


class FakeEmployeeRepo:
    def get_all(self):
        return [Employee(employee_id="E001", name="Asha", daily_wage=1000)]


class FakeAttendanceRepo:
    def __init__(self, *, down=False):
        self._down = down
        self.last_args = None

    def get_by_employee_and_date_range(self, employee_id, start_date, end_date):
        self.last_args = (employee_id, start_date, end_date)
        if self._down:
            raise DataSourceError("timeout")
        return [
            AttendanceRecord(employee_id="E001", work_date=date(2026, 1, 5), check_in_time="09:00", check_out_time="18:00"),
            AttendanceRecord(employee_id="E001", work_date=date(2026, 1, 6), working_hours=7.5),
        ]


@dataclass(frozen=True)
class FakeContainer:
    payroll_service: PayrollService
    currency_symbol: str = "₹"


def _client(attendance: FakeAttendanceRepo):
    app = Flask(__name__)
    payroll_controller.register(app, FakeContainer(PayrollService(FakeEmployeeRepo(), attendance)))
    return app.test_client()


def test_wages_endpoint_returns_rows_and_display_values():
    resp = _client(FakeAttendanceRepo()).get("/api/payroll/wages?start=2026-01-01&end=2026-01-31")

    assert resp.status_code == 200
    body = resp.get_json()
    [row] = body["results"]
    assert row["total_hours"] == 16.5
    assert row["exception_hours"] == 2.0
    assert row["calculated_wage"] == 1812.5
    assert row["display"]["calculated_wage"] == "₹1,812.50"
    assert body["summary"]["display_total_wage"] == "₹1,812.50"
    assert body["summary"]["display_total_wage_compact"] == "₹1.8K"
    assert body["summary"]["display_total_hours"] == "16.5"


def test_wages_default_period_is_month_to_date(monkeypatch):
    monkeypatch.setattr(payroll_controller, "today_local", lambda: date(2026, 3, 17))
    repo = FakeAttendanceRepo()

    resp = _client(repo).get("/api/payroll/wages")

    assert resp.status_code == 200
    assert repo.last_args == ("E001", date(2026, 3, 1), date(2026, 3, 17))


def test_bonus_default_period_starts_previous_year(monkeypatch):
    monkeypatch.setattr(payroll_controller, "today_local", lambda: date(2026, 3, 17))
    repo = FakeAttendanceRepo()

    resp = _client(repo).get("/api/payroll/bonus?rate=10")

    assert resp.status_code == 200
    assert repo.last_args == ("E001", date(2025, 1, 1), date(2026, 3, 17))
    body = resp.get_json()
    assert body["bonus_rate"] == 10
    assert body["results"][0]["bonus_amount"] == pytest.approx(181.25)
    assert body["results"][0]["last_bonus_paid"] == "Never"


def test_data_source_outage_is_503_not_zero_rows():
    resp = _client(FakeAttendanceRepo(down=True)).get("/api/payroll/wages?start=2026-01-01&end=2026-01-31")

    assert resp.status_code == 503
    body = resp.get_json()
    assert body["kind"] == "data_source"
    assert "results" not in body


@pytest.mark.parametrize(
    "query",
    ["start=2026-13-01&end=2026-01-31", "start=2026-02-01&end=2026-01-01"],
)
def test_bad_period_is_400(query):
    resp = _client(FakeAttendanceRepo()).get(f"/api/payroll/wages?{query}")

    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "validation"


@pytest.mark.parametrize("rate", ["lots", "inf", "nan", "-5"])
def test_bad_bonus_rate_is_400(rate):
    resp = _client(FakeAttendanceRepo()).get(f"/api/payroll/bonus?start=2026-01-01&end=2026-01-31&rate={rate}")

    assert resp.status_code == 400


def test_employees_endpoint():
    resp = _client(FakeAttendanceRepo()).get("/api/employees")

    assert resp.status_code == 200
    assert resp.get_json() == [{"employee_id": "E001", "name": "Asha", "daily_wage": 1000, "last_bonus_paid": None}]
