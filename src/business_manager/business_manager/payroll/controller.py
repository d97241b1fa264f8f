from __future__ import annotations

import logging
from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import month_start, parse_iso_date, previous_year_start, today_local
from ..container import Container
from ..core.exceptions import DataSourceError, ValidationError
from .formatters import format_compact_currency, format_currency, format_hours, format_number
from .model import BonusCalculationResult, WageCalculationResult

logger = logging.getLogger(__name__)


def _period_from_args(default_start: date, default_end: date) -> tuple[date, date]:
    start_raw = request.args.get("start", "").strip()
    end_raw = request.args.get("end", "").strip()
    start = parse_iso_date(start_raw) if start_raw else default_start
    end = parse_iso_date(end_raw) if end_raw else default_end
    return start, end


def register(app: Flask, container: Container) -> None:
    symbol = container.currency_symbol

    def money(amount: float) -> str:
        return format_currency(amount, symbol=symbol)

    def wage_row(r: WageCalculationResult) -> dict:
        return {
            "employee_id": r.employee_id,
            "employee_name": r.employee_name,
            "total_hours": r.total_hours,
            "exception_hours": r.exception_hours,
            "effective_hours": r.effective_hours,
            "daily_wage": r.daily_wage,
            "calculated_wage": r.calculated_wage,
            "period_start": r.period_start.isoformat(),
            "period_end": r.period_end.isoformat(),
            "attendance_records": r.attendance_record_count,
            "display": {
                "total_hours": format_hours(r.total_hours),
                "effective_hours": format_hours(r.effective_hours),
                "daily_wage": money(r.daily_wage),
                "calculated_wage": money(r.calculated_wage),
            },
        }

    def bonus_row(r: BonusCalculationResult) -> dict:
        return {
            "employee_id": r.employee_id,
            "employee_name": r.employee_name,
            "total_earned": r.total_earned,
            "bonus_rate": r.bonus_rate_percent,
            "bonus_amount": r.bonus_amount,
            "period_start": r.period_start.isoformat(),
            "period_end": r.period_end.isoformat(),
            "last_bonus_paid": r.last_bonus_paid_label,
            "display": {
                "total_earned": money(r.total_earned),
                "bonus_amount": money(r.bonus_amount),
            },
        }

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return jsonify({"error": str(exc), "kind": "validation"}), 400

    @app.errorhandler(DataSourceError)
    def handle_data_source_error(exc: DataSourceError):
        # An outage must never look like "no attendance": no zero rows here.
        logger.error("Payroll request failed: %s", exc)
        return jsonify({"error": "Attendance data is unavailable, please retry", "kind": "data_source"}), 503

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        employees = container.payroll_service.list_employees()
        return jsonify(
            [
                {
                    "employee_id": e.employee_id,
                    "name": e.name,
                    "daily_wage": e.daily_wage,
                    "last_bonus_paid": e.last_bonus_paid,
                }
                for e in employees
            ]
        )

    @app.route("/api/payroll/wages", methods=["GET"], endpoint="payroll_wages")
    def payroll_wages():
        today = today_local()
        start, end = _period_from_args(month_start(today), today)
        employee_id = request.args.get("employee_id", "").strip() or None

        report = container.payroll_service.calculate_wages(start=start, end=end, employee_id=employee_id)
        return jsonify(
            {
                "period_start": report.period_start.isoformat(),
                "period_end": report.period_end.isoformat(),
                "results": [wage_row(r) for r in report.results],
                "summary": {
                    "employees": len(report.results),
                    "total_hours": report.total_hours,
                    "total_wage": report.total_wage,
                    "display_total_hours": format_number(report.total_hours),
                    "display_total_wage": money(report.total_wage),
                    "display_total_wage_compact": format_compact_currency(report.total_wage, symbol=symbol),
                },
            }
        )

    @app.route("/api/payroll/bonus", methods=["GET"], endpoint="payroll_bonus")
    def payroll_bonus():
        today = today_local()
        start, end = _period_from_args(previous_year_start(today), today)
        employee_id = request.args.get("employee_id", "").strip() or None
        rate_raw = request.args.get("rate", "").strip()

        report = container.payroll_service.calculate_bonus(
            start=start,
            end=end,
            employee_id=employee_id,
            bonus_rate_percent=rate_raw if rate_raw else None,
        )
        return jsonify(
            {
                "period_start": report.period_start.isoformat(),
                "period_end": report.period_end.isoformat(),
                "bonus_rate": report.bonus_rate_percent,
                "results": [bonus_row(r) for r in report.results],
                "summary": {
                    "employees": len(report.results),
                    "total_earned": report.total_earned,
                    "total_bonus": report.total_bonus,
                    "display_total_earned": money(report.total_earned),
                    "display_total_bonus": money(report.total_bonus),
                    "display_total_bonus_compact": format_compact_currency(report.total_bonus, symbol=symbol),
                },
            }
        )
