"""Numeric coercion helpers.

Form inputs reach the engine as floats, strings, None or NaN. The
calculators favor a best-effort estimate over failing, so every amount
is funneled through these helpers first.
"""

import math
from typing import Any, Optional


def coerce_amount(value: Any, default: float = 0.0) -> float:
    """Coerce a monetary or area input to a finite, non-negative float.

    None, NaN, infinities, unparseable strings and negative values all
    collapse to ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number) or number < 0:
        return default
    return number


def coerce_signed(value: Any, default: float = 0.0) -> float:
    """Coerce to a finite float, keeping the sign."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def coerce_optional_amount(value: Any) -> Optional[float]:
    """Like coerce_amount, but missing or zero inputs become None.

    Used for optional inputs that fall back to a computed default when
    left blank.
    """
    number = coerce_amount(value)
    return number if number > 0 else None


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up.

    Python's round() uses banker's rounding; currency amounts and day
    offsets round half up.
    """
    return int(math.floor(value + 0.5))


def safe_percentage(numerator: float, denominator: float) -> float:
    """Return numerator / denominator * 100, or 0 when denominator <= 0."""
    if denominator <= 0:
        return 0.0
    return (numerator / denominator) * 100
