"""Conversions between integers and their decimal text."""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")
_LLONG_MAX = 2**63 - 1
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace and one sign are accepted and parsing stops at the
    first non-digit. When the digits overflow a 64-bit value the result is
    -1 for positive input and 0 for negative input; otherwise the value is
    wrapped to a 32-bit signed integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        result = result * 10 + ord(text[pos]) - ord("0")
        if result > _LLONG_MAX:
            return 0 if sign == -1 else -1
        pos += 1
    return _wrap_int32(sign * result)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)