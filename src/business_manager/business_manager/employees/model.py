from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee, reduced to what payroll consumes.

    Note: ``employee_id`` is the business id attendance rows refer to
    (``emp_id`` in older documents); ``record_id`` is the storage key.
    """

    employee_id: str
    name: str
    daily_wage: float = 0.0
    record_id: Optional[str] = None
    last_bonus_paid: Optional[str] = None
