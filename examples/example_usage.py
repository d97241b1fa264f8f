"""Example: use the payroll service directly (no Flask).

Controllers are a thin layer; the wage and bonus rules live in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.business_manager.business_manager.container import build_container
from src.business_manager.business_manager.payroll.formatters import format_currency


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    today = date.today()
    report = container.payroll_service.calculate_wages(start=today.replace(day=1), end=today)
    for row in report.results:
        print(f"{row.employee_name:<24} {row.effective_hours:>7.2f}h {format_currency(row.calculated_wage):>14}")
    print(f"{'Total':<24} {'':>8} {format_currency(report.total_wage):>14}")


if __name__ == "__main__":
    main()
