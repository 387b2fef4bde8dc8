"""Rounding and number rendering used for display and export.

All rounding works on the exact binary value of the float (via
``Decimal(value)``), so ties are detected exactly and never shift because of
an intermediate conversion.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    >>> round_half_away_from_zero(2.5)
    3
    >>> round_half_away_from_zero(-2.5)
    -3
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite value: {value}")
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_fixed(value: float, digits: int) -> str:
    """Render value with a fixed number of decimals, ties away from zero.

    >>> format_fixed(4.0, 2)
    '4.00'
    >>> format_fixed(0.125, 2)
    '0.13'
    """
    if digits < 0:
        raise ValueError("digits must be non-negative")
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value: {value}")
    quantum = Decimal(1).scaleb(-digits)
    return f"{Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP):f}"


# Plain notation covers magnitudes from 1e-6 up to, not including, 1e21
PLAIN_MAX_POINT = 21
PLAIN_MIN_POINT = -6


def format_number(value: int | float) -> str:
    """Render a number the way it was entered: 48.0 -> '48', 48.5 -> '48.5'.

    Floats use the shortest digits that read back as the same value.
    Magnitudes of 1e21 and above, or below 1e-6, switch to exponent form
    with an unpadded exponent:

    >>> format_number(1e21)
    '1e+21'
    >>> format_number(1.5e-7)
    '1.5e-7'
    >>> format_number(1e16)
    '10000000000000000'
    """
    if isinstance(value, bool):
        raise TypeError("Booleans are not numbers here")
    if isinstance(value, int) and abs(value) < 10**PLAIN_MAX_POINT:
        return str(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value: {value}")
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(float(value)))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    # Decimal point position counted from the first significant digit
    point = len(digit_tuple) + exponent

    if len(digits) <= point <= PLAIN_MAX_POINT:
        return sign + digits + "0" * (point - len(digits))
    if 0 < point <= PLAIN_MAX_POINT:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    if PLAIN_MIN_POINT < point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
    return f"{sign}{mantissa}e{point - 1:+d}"
