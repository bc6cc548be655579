"""
Value formatting helpers for outbound payloads.

Numbers arriving from the host runtime are rendered the way the browser
renders them (``5`` not ``5.0``, ``1e-7`` not ``1e-07``) so payloads stay
stable regardless of whether a price was parsed as an int or a float.
"""

import math
from decimal import Decimal
from typing import Any

from .constants import PRICE_DISPLAY_WIDTH

# Browser number rendering switches to exponent form outside this range
_MAX_FIXED_EXPONENT = 21
_MIN_FIXED_EXPONENT = -6


def _float_to_string(value: float) -> str:
    """Render a float with the browser's shortest round-trip notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    # Position of the decimal point relative to the first digit
    n = exponent + k

    if k <= n <= _MAX_FIXED_EXPONENT:
        text = digits + "0" * (n - k)
    elif 0 < n <= _MAX_FIXED_EXPONENT:
        text = f"{digits[:n]}.{digits[n:]}"
    elif _MIN_FIXED_EXPONENT < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + text


def number_to_string(value: Any) -> str:
    """
    Render a scalar as display text.

    Floats use browser notation, everything else uses ``str()``.
    ``None`` renders as an empty string.

    Examples:
        >>> number_to_string(5.0)
        '5'
        >>> number_to_string(12.345)
        '12.345'
        >>> number_to_string(1e-7)
        '1e-7'
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_to_string(value)
    return str(value)


def truncate_price(value: Any, width: int = PRICE_DISPLAY_WIDTH) -> str:
    """
    Truncate the string form of a price to ``width`` characters.

    This is a display truncation, not rounding: ``12.345`` becomes
    ``"12.3"`` and ``0.999`` becomes ``"0.99"``. Missing prices yield ``""``.
    """
    if value is None:
        return ""
    return number_to_string(value)[:width]
