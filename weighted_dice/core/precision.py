
"""
precision.py
Decimal helpers used to validate distributions and to size the sampling range.
Floats are read through repr (the shortest string that round-trips) and rounded to a fixed number of
significant digits, so binary artifacts such as 0.1 + 0.2 == 0.30000000000000004 count as one decimal.
Related modules:
- rollers/base.py: validate() uses floor_decimals, max_range() and thresholds() use number_of_decimals/to_decimal.
"""

from decimal import Decimal, ROUND_FLOOR, localcontext
from fractions import Fraction
from typing import Optional

DEFAULT_SIGNIFICANT_DIGITS = 15


def to_decimal(value, significant_digits: Optional[int] = None) -> Decimal:
    """
    Convert a probability to a Decimal.
    Args:
        value: float, int, str, Decimal or Fraction.
        significant_digits (int|None): Rounding applied to float (and Fraction) inputs only.
    Returns:
        Decimal: The converted value. Exact inputs (Decimal, int, str) are not rounded.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, Fraction):
        value = float(value)
    if isinstance(value, float):
        result = Decimal(repr(value))
        if significant_digits is not None and result.is_finite():
            with localcontext() as ctx:
                ctx.prec = significant_digits
                result = +result
        return result
    return Decimal(str(value))


def number_of_decimals(value, significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> int:
    """
    Count the digits after the decimal point needed to write value exactly, trailing zeros excluded.
    Whole numbers (0, 1.0, 3) still report 1.
    Args:
        value: The probability.
        significant_digits (int): Rounding applied to floats before counting.
    Returns:
        int: Number of decimals, at least 1.
    Raises:
        ValueError: If value is NaN or infinite.
    """
    d = to_decimal(value, significant_digits)
    if not d.is_finite():
        raise ValueError(f"probability must be finite, got {value!r}")
    exponent = d.normalize().as_tuple().exponent
    return max(1, -exponent)


def floor_decimals(value, places: int) -> Decimal:
    """
    Truncate value toward negative infinity at the given number of fractional digits.
    Equivalent to floor(value * 10**places) / 10**places, done in fixed point.
    """
    d = to_decimal(value)
    scaled = d.scaleb(places).to_integral_value(rounding=ROUND_FLOOR)
    return scaled.scaleb(-places)
