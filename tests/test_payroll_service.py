from __future__ import annotations

from datetime import date

import pytest

from src.business_manager.business_manager.attendance.model import AttendanceRecord
from src.business_manager.business_manager.core.exceptions import DataSourceError, ValidationError
from src.business_manager.business_manager.employees.model import Employee
from src.business_manager.business_manager.payroll.service import PayrollService


class FakeEmployeeRepo:
    def __init__(self, employees):
        self._employees = employees

    def get_all(self):
        return list(self._employees)


class FakeAttendanceRepo:
    def __init__(self, records, *, fail_for=None):
        self._records = records
        self._fail_for = fail_for
        self.calls = []

    def get_by_employee_and_date_range(self, employee_id, start_date, end_date):
        self.calls.append((employee_id, start_date, end_date))
        if employee_id == self._fail_for:
            raise DataSourceError("connection refused")
        return [r for r in self._records if r.employee_id == employee_id and start_date <= r.work_date <= end_date]


EMPLOYEES = [
    Employee(employee_id="E001", name="Asha", daily_wage=1000, record_id="65a1"),
    Employee(employee_id="E002", name="Ravi", daily_wage=800),
]

RECORDS = [
    AttendanceRecord(employee_id="E001", work_date=date(2026, 1, 5), check_in_time="09:00", check_out_time="18:00"),
    AttendanceRecord(employee_id="E001", work_date=date(2026, 1, 6), working_hours=7.5),
    AttendanceRecord(employee_id="E002", work_date=date(2026, 1, 5), status="Present"),
]


def _service(attendance=None, **kwargs):
    return PayrollService(FakeEmployeeRepo(EMPLOYEES), attendance or FakeAttendanceRepo(RECORDS), **kwargs)


def test_wages_for_all_employees():
    report = _service().calculate_wages(start=date(2026, 1, 1), end=date(2026, 1, 31))

    assert [r.employee_id for r in report.results] == ["E001", "E002"]
    assert report.results[0].calculated_wage == pytest.approx(1812.5)
    assert report.results[1].calculated_wage == pytest.approx(700.0)
    assert report.total_wage == pytest.approx(2512.5)


def test_wages_forwards_period_to_repository():
    repo = FakeAttendanceRepo(RECORDS)
    _service(repo).calculate_wages(start=date(2026, 1, 6), end=date(2026, 1, 6), employee_id="E001")

    assert repo.calls == [("E001", date(2026, 1, 6), date(2026, 1, 6))]


def test_employee_filter_accepts_storage_id():
    report = _service().calculate_wages(start=date(2026, 1, 1), end=date(2026, 1, 31), employee_id="65a1")

    assert [r.employee_id for r in report.results] == ["E001"]


def test_unknown_employee_filter_yields_no_rows():
    report = _service().calculate_wages(start=date(2026, 1, 1), end=date(2026, 1, 31), employee_id="nope")

    assert report.results == []
    assert report.total_wage == 0


def test_fetch_failure_fails_the_whole_batch():
    svc = _service(FakeAttendanceRepo(RECORDS, fail_for="E002"))

    with pytest.raises(DataSourceError):
        svc.calculate_wages(start=date(2026, 1, 1), end=date(2026, 1, 31))


def test_inverted_period_is_rejected():
    with pytest.raises(ValidationError):
        _service().calculate_wages(start=date(2026, 2, 1), end=date(2026, 1, 1))


def test_bonus_uses_configured_default_rate():
    svc = _service(default_bonus_rate_percent=10)
    report = svc.calculate_bonus(start=date(2026, 1, 1), end=date(2026, 1, 31), employee_id="E002")

    assert report.bonus_rate_percent == 10
    assert report.results[0].bonus_amount == pytest.approx(70.0)


def test_bonus_rate_override_and_totals():
    report = _service().calculate_bonus(
        start=date(2026, 1, 1),
        end=date(2026, 1, 31),
        bonus_rate_percent="20",
    )

    # E001: (8 + 6.5) * 1000 / 8 = 1812.5, E002: 7 * 800 / 8 = 700
    assert report.total_earned == pytest.approx(2512.5)
    assert report.total_bonus == pytest.approx(502.5)


@pytest.mark.parametrize("rate", ["abc", -1, "inf", "nan", float("inf")])
def test_bad_bonus_rate_is_rejected(rate):
    with pytest.raises(ValidationError):
        _service().calculate_bonus(start=date(2026, 1, 1), end=date(2026, 1, 31), bonus_rate_percent=rate)


def test_bonus_fetch_failure_propagates():
    svc = _service(FakeAttendanceRepo(RECORDS, fail_for="E001"))

    with pytest.raises(DataSourceError):
        svc.calculate_bonus(start=date(2026, 1, 1), end=date(2026, 1, 31))


class CaseFoldingAttendanceRepo:
    """Returns rows whose id differs in case, like a case-insensitive collation."""

    def get_by_employee_and_date_range(self, employee_id, start_date, end_date):
        return [
            AttendanceRecord(
                employee_id=employee_id.upper(),
                work_date=date(2026, 1, 5),
                check_in_time="09:00",
                check_out_time="18:00",
            )
        ]


def test_records_returned_for_an_employee_are_all_counted():
    employees = FakeEmployeeRepo([Employee(employee_id="emp001", name="Asha", daily_wage=800)])
    svc = PayrollService(employees, CaseFoldingAttendanceRepo())

    [wage] = svc.calculate_wages(start=date(2026, 1, 1), end=date(2026, 1, 31)).results
    [bonus] = svc.calculate_bonus(start=date(2026, 1, 1), end=date(2026, 1, 31), bonus_rate_percent=10).results

    assert wage.attendance_record_count == 1
    assert wage.calculated_wage == pytest.approx(800.0)
    assert bonus.total_earned == pytest.approx(800.0)
