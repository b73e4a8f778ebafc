"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TextIO

_NUL = "\0"
_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_INT32_LIMIT = 2**31


def _c_string(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    return text.split(_NUL, 1)[0]


def _int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - 2 * _INT32_LIMIT if value >= _INT32_LIMIT else value


def _uint32(value: int) -> int:
    return value & _UINT32_MASK


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError("%c expects a single character")
        return arg
    return chr(arg & 0xFF)


def _format_string(arg: Any) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError("%s expects a string or None")
    return _c_string(arg)


def _format_address(arg: Any) -> str:
    value = arg & _UINT64_MASK
    if value == 0:
        return "(nil)"
    return f"0x{value:x}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_address,
    "d": lambda arg: str(_int32(arg)),
    "i": lambda arg: str(_int32(arg)),
    "u": lambda arg: str(_uint32(arg)),
    "x": lambda arg: format(_uint32(arg), "x"),
    "X": lambda arg: format(_uint32(arg), "X"),
}


def render_format(fmt: str, *args: Any) -> str:
    """Return the text ``fmt`` produces with ``args`` substituted.

    An unknown conversion prints its own character, ``%%`` prints ``%`` and
    a lone ``%`` at the end prints nothing. Extra arguments are ignored.
    """
    values = iter(args)
    parts: list[str] = []
    chars = iter(_c_string(fmt))
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            parts.append(spec)
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"missing argument for %{spec}") from None
        parts.append(convert(value))
    return "".join(parts)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = render_format(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)