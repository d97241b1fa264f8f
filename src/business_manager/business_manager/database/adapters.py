"""Normalisation boundary between stored documents and domain entities.

Employee and attendance documents were written by several versions of the
data-entry forms, so the same field shows up under different names
(``daily_wage``/``dailyWage``/``salary``, ``employee_id``/``emp_id``,
``check_in_time``/``checkIn`` ...). Everything past this module sees only the
canonical :class:`Employee` and :class:`AttendanceRecord`.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..attendance.model import AttendanceRecord
from ..core.constants import UNKNOWN_EMPLOYEE_NAME
from ..core.exceptions import DataSourceError
from ..employees.model import Employee
from .mysql_base import normalize_mysql_time

logger = logging.getLogger(__name__)

EMPLOYEE_ID_FIELDS = ("employee_id", "emp_id", "employeeId")
RECORD_ID_FIELDS = ("_id", "id")
DAILY_WAGE_FIELDS = ("daily_wage", "dailyWage", "salary")
WORK_DATE_FIELDS = ("work_date", "date")
CHECK_IN_FIELDS = ("check_in_time", "checkIn", "check_in")
CHECK_OUT_FIELDS = ("check_out_time", "checkOut", "check_out")
WORKING_HOURS_FIELDS = ("working_hours", "hoursWorked", "hours_worked")
NOTE_FIELDS = ("notes", "note")


def _first(doc: Mapping[str, Any], fields: tuple[str, ...]) -> Any:
    """First value among ``fields`` that is set and not blank."""
    for field in fields:
        value = doc.get(field)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_number(value: Any, *, field: str) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        logger.warning("Ignoring non-numeric %s value %r", field, value)
        return None


def _as_time_text(value: Any) -> Optional[str]:
    if isinstance(value, (time, timedelta)):
        return normalize_mysql_time(value).strftime("%H:%M")
    return _as_text(value)


def _as_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()
        except ValueError:
            pass
    raise DataSourceError(f"Attendance document has no usable date: {value!r}")


def normalize_employee(doc: Mapping[str, Any]) -> Employee:
    record_id = _as_text(_first(doc, RECORD_ID_FIELDS))
    employee_id = _as_text(_first(doc, EMPLOYEE_ID_FIELDS)) or record_id or ""

    # A zero daily wage falls through to the generic salary field.
    daily_wage = 0.0
    for field in DAILY_WAGE_FIELDS:
        amount = _as_number(doc.get(field), field=field)
        if amount:
            daily_wage = amount
            break

    return Employee(
        employee_id=employee_id,
        name=_as_text(doc.get("name")) or UNKNOWN_EMPLOYEE_NAME,
        daily_wage=daily_wage,
        record_id=record_id,
        last_bonus_paid=_as_text(_first(doc, ("last_bonus_paid", "lastBonusPaid"))),
    )


def normalize_attendance(doc: Mapping[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        employee_id=_as_text(_first(doc, EMPLOYEE_ID_FIELDS)) or "",
        work_date=_as_date(_first(doc, WORK_DATE_FIELDS)),
        check_in_time=_as_time_text(_first(doc, CHECK_IN_FIELDS)),
        check_out_time=_as_time_text(_first(doc, CHECK_OUT_FIELDS)),
        working_hours=_as_number(_first(doc, WORKING_HOURS_FIELDS), field="working_hours"),
        status=_as_text(doc.get("status")) or "",
        note=_as_text(_first(doc, NOTE_FIELDS)),
    )
