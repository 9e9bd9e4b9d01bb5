"""Decimal helpers for form input

Form fields arrive as ints, strings or Decimals. Amounts are kept as exact
Decimals; floats are routed through str() so 0.1 stays 0.1.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """Coerce form input to Decimal; blank or unparseable input counts as zero"""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        return ZERO
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    else:
        text = str(value).strip().replace(",", "")
        if not text:
            return ZERO
        try:
            result = Decimal(text)
        except InvalidOperation:
            return ZERO
    if not result.is_finite():
        return ZERO
    return result


def clamp(value: Decimal, lower: Decimal = ZERO, upper: Optional[Decimal] = None) -> Decimal:
    """Clamp value into [lower, upper]; an upper bound below lower collapses to lower"""
    if upper is not None:
        upper = max(upper, lower)
        if value > upper:
            return upper
    if value < lower:
        return lower
    return value
