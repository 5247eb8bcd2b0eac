"""Decimal helpers for money, hours and percentages."""

from __future__ import annotations

from decimal import Decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value: Decimal | int | float | str | None) -> Decimal:
    """Exact Decimal for ints/strings; floats go through ``str`` to drop binary noise."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def safe_div(numerator: Decimal, denominator: Decimal | int) -> Decimal:
    """``numerator / denominator``, or 0 when the denominator is not positive."""
    if denominator <= 0:
        return ZERO
    return numerator / Decimal(denominator)


def capped_percent(part: Decimal, whole: Decimal | int) -> Decimal:
    """``part / whole * 100`` clamped to [0, 100]; 0 for an empty whole."""
    return max(min(safe_div(part, whole) * HUNDRED, HUNDRED), ZERO)
