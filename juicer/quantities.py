# juicer/quantities.py
"""
Liter amounts.

Volumes are entered as short decimals (4.25, 1.1). Capacity sums and the
two-decimal console output work on those decimal values, not on the
binary approximation of the float.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

TWO_PLACES = Decimal("0.01")


def to_decimal(amount: float) -> Decimal:
    """Decimal value of the float's shortest representation."""
    return Decimal(repr(float(amount)))


def format_liters(amount: float) -> str:
    """Two decimal places, halves rounded away from zero (2.125 -> 2.13)."""
    return str(to_decimal(amount).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))
