"""
Number Parsing & Display
========================
Conversions between operand text and floats.

Functions:
    parse_float_prefix: Permissive parse that reads the longest numeric prefix.
    format_number: Shortest round-trip display, fixed or exponent notation.
"""
from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Optional

# Sign, then "Infinity" or a decimal literal with an optional exponent.
# ASCII digits only; `\d` would also accept other scripts' digits.
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)

# Characters JavaScript's trim() removes: whitespace plus line terminators.
# Differs from str.strip(), which keeps U+FEFF but drops \x85 and \x1c-\x1f.
WHITESPACE = (
    "\t\n\v\f\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Decimal exponents in [-7, 21) print in fixed notation.
_MAX_FIXED_DIGITS = 21
_MIN_FIXED_EXPONENT = -6


def parse_float_prefix(text: str) -> Optional[float]:
    """
    Parse the longest numeric prefix of `text`, ignoring whatever follows.

    Leading whitespace is skipped. Returns None when no numeric prefix exists.

    >>> parse_float_prefix("12abc")
    12.0
    >>> parse_float_prefix("abc") is None
    True
    """
    match = _FLOAT_PREFIX.match(text.lstrip(WHITESPACE))
    if match is None:
        return None
    return float(match.group(0))


def format_number(value: float) -> str:
    """
    Format a float for display.

    Integral values drop the trailing ".0", other values use the shortest
    digits that round-trip. Very large or very small magnitudes switch to
    exponent notation ("1e+21", "1.5e-7").
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"  # also -0.0

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + exponent  # position of the decimal point relative to the digits

    if k <= n <= _MAX_FIXED_DIGITS:
        body = digits + "0" * (n - k)
    elif 0 < n <= _MAX_FIXED_DIGITS:
        body = f"{digits[:n]}.{digits[n:]}"
    elif _MIN_FIXED_EXPONENT < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"

    return sign + body
