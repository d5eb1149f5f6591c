"""
Numeric parsing and rendering helpers shared by the value slots and messages.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Optional, Union

ZERO = Decimal("0")


def parse_decimal(value: Any) -> Optional[Decimal]:
    """
    Parse a host or configuration number into a Decimal.

    Args:
        value: str, int, float, Decimal or None

    Returns:
        Finite Decimal, or None when the value is absent, blank or not a number
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, (int, float)):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = Decimal(value.strip())
    except InvalidOperation:
        return None
    return parsed if parsed.is_finite() else None


def safe_decimal(value: Any) -> Decimal:
    """Like parse_decimal but absent or invalid numbers become zero."""
    parsed = parse_decimal(value)
    return ZERO if parsed is None else parsed


def to_fixed(value: Decimal, digits: int) -> str:
    """Render with exactly `digits` fraction digits, e.g. to_fixed(Decimal("10"), 1) == "10.0"."""
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the fraction digits
        ctx.prec = max(ctx.prec, value.adjusted() + digits + 2)
        return format(value.quantize(quantum, rounding=ROUND_HALF_UP), "f")


def format_number(value: Decimal) -> str:
    """Shortest plain rendering: 10 -> "10", 12.50 -> "12.5"."""
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")


def to_json_number(value: Decimal) -> Union[int, float]:
    if value == value.to_integral_value():
        return int(value)
    return float(value)
