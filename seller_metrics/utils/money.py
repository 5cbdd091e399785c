"""
Seller Metrics — Money Helpers

All money values use Decimal, never float. Floats coming from callers or
custom strategies are converted through str() so 0.1 stays 0.1.

Rounding is ROUND_HALF_UP on Decimal, which is half-away-from-zero:
    2.345 → 2.35, -2.345 → -2.35
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any

_TWO_DP = Decimal("0.01")

# Enough digits to quantize any total built from bounded inputs
_QUANTIZE_PRECISION = 60


def quantize_money(value: Decimal) -> Decimal:
    """Round to 2dp, half away from zero."""
    with localcontext() as ctx:
        ctx.prec = _QUANTIZE_PRECISION
        return value.quantize(_TWO_DP, rounding=ROUND_HALF_UP)


def to_decimal(value: Any, *, field: str = "value") -> Decimal:
    """
    Coerce a numeric value to a finite Decimal.

    Args:
        value: Decimal, int or float. bool is rejected even though it is an int.
        field: Name used in the error message.

    Returns:
        Decimal equivalent of value.

    Raises:
        TypeError: If value is not a number, or is NaN or infinite.
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float)):
        raise TypeError(f"{field} must be a number, got {type(value).__name__}")

    result = value if isinstance(value, Decimal) else Decimal(str(value))
    if not result.is_finite():
        raise TypeError(f"{field} must be finite, got {result}")
    return result
