"""Fixed scientific-notation display of numeric results."""

from __future__ import annotations

import math

from . import config

_MIN_SAFE_EXPONENT = -300
_SUBNORMAL_SCALE = 1e300


def format_scientific(number: float, digits: int | None = None) -> str:
    """Format a number as '<mantissa> x 10^<exponent>'.

    Zero is shown as "0". Every other value uses scientific notation, even
    when a plain decimal would be shorter.

    Args:
        number: Finite real number to format
        digits: Digits after the mantissa's decimal point (default: MANTISSA_DIGITS)

    Returns:
        Display string, e.g. "1.234000 x 10^3" or "4.500000 x 10^-4"

    Raises:
        ValueError: If the number is infinite or NaN
    """
    if digits is None:
        digits = config.MANTISSA_DIGITS
    if not math.isfinite(number):
        raise ValueError(f"Cannot format non-finite value: {number}")
    if number == 0:
        return "0"
    exponent = math.floor(math.log10(abs(number)))
    if exponent < _MIN_SAFE_EXPONENT:
        # 10**exponent underflows to zero for subnormal numbers
        mantissa = (number * _SUBNORMAL_SCALE) / 10 ** (exponent - _MIN_SAFE_EXPONENT)
    else:
        mantissa = number / 10**exponent
    return f"{mantissa:.{digits}f} x 10^{exponent}"
