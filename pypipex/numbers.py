"""Conversions between decimal text and 32-bit integers, plus integer square root."""

from __future__ import annotations

import math

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"


def _wrap_int32(value: int) -> int:
    """Keep the low 32 bits of ``value`` as a signed integer."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value


def _require_int(n: object) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("expected an integer")
    return n


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, then one optional ``+`` or ``-`` sign,
    then decimal digits up to the first non-digit. Text without digits
    gives 0. The result is truncated to a signed 32-bit integer.
    """
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    _require_int(n)
    if not INT_MIN <= n <= INT_MAX:
        raise ValueError(f"{n} is outside the 32-bit signed range")
    return str(n)


def isqrt(n: int) -> int:
    """Floor of the square root of ``n``; 0 for ``n <= 0``."""
    _require_int(n)
    if n <= 0:
        return 0
    return math.isqrt(n)