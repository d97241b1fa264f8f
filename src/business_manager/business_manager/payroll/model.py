from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class WageCalculationResult:
    """One employee's wage for a period. Built per request, never stored."""

    employee_id: str
    employee_name: str
    total_hours: float
    exception_hours: float
    effective_hours: float
    daily_wage: float
    calculated_wage: float
    period_start: date
    period_end: date
    attendance_record_count: int


@dataclass(frozen=True)
class BonusCalculationResult:
    employee_id: str
    employee_name: str
    total_earned: float
    bonus_rate_percent: float
    bonus_amount: float
    period_start: date
    period_end: date
    last_bonus_paid_label: str


@dataclass(frozen=True)
class WageReport:
    period_start: date
    period_end: date
    results: list[WageCalculationResult] = field(default_factory=list)

    @property
    def total_wage(self) -> float:
        return sum((r.calculated_wage for r in self.results), 0.0)

    @property
    def total_hours(self) -> float:
        return sum((r.total_hours for r in self.results), 0.0)


@dataclass(frozen=True)
class BonusReport:
    period_start: date
    period_end: date
    bonus_rate_percent: float
    results: list[BonusCalculationResult] = field(default_factory=list)

    @property
    def total_earned(self) -> float:
        return sum((r.total_earned for r in self.results), 0.0)

    @property
    def total_bonus(self) -> float:
        return sum((r.bonus_amount for r in self.results), 0.0)
