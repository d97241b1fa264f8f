"""Display formatting for amounts and hours, Indian business conventions.

Grouping follows the lakh/crore system: the last three digits form one group
and every group above it has two (``12,34,567.00``).
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CURRENCY_SYMBOL = "₹"


def _quantize(amount: float, places: int) -> Decimal:
    return Decimal(str(amount)).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def _group_indian(digits: str) -> str:
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def _split_signed(value: Decimal) -> tuple[str, str, str]:
    sign = "-" if value < 0 else ""
    integer, _, fraction = f"{abs(value):f}".partition(".")
    return sign, _group_indian(integer), fraction


def format_currency(amount: float, *, symbol: str = CURRENCY_SYMBOL) -> str:
    """``1234.5`` -> ``"₹1,234.50"``."""
    sign, integer, fraction = _split_signed(_quantize(amount, 2))
    return f"{sign}{symbol}{integer}.{fraction}"


def format_number(number: float) -> str:
    """Indian grouping, up to three decimals, no trailing zeros."""
    sign, integer, fraction = _split_signed(_quantize(number, 3))
    fraction = fraction.rstrip("0")
    return f"{sign}{integer}.{fraction}" if fraction else f"{sign}{integer}"


def format_compact_currency(amount: float, *, symbol: str = CURRENCY_SYMBOL) -> str:
    if amount >= 10_000_000:
        return f"{symbol}{amount / 10_000_000:.1f}Cr"
    if amount >= 100_000:
        return f"{symbol}{amount / 100_000:.1f}L"
    if amount >= 1_000:
        return f"{symbol}{amount / 1_000:.1f}K"
    return f"{symbol}{amount:.0f}"


def format_hours(hours: float) -> str:
    return f"{_quantize(hours, 2)}"
