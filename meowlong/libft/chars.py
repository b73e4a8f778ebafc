"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import TypeVar

_Char = TypeVar("_Char", int, str)

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: int | str) -> bool:
    """Whether ``c`` is an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: int | str) -> bool:
    """Whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """Whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: _Char, code: int) -> _Char:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: _Char) -> _Char:
    """Return the upper-case form of an ASCII lower-case letter, else ``c``."""
    code = _code(c)
    if _is_lower(code):
        return _convert(c, code - _CASE_OFFSET)
    return c


def to_lower(c: _Char) -> _Char:
    """Return the lower-case form of an ASCII upper-case letter, else ``c``."""
    code = _code(c)
    if _is_upper(code):
        return _convert(c, code + _CASE_OFFSET)
    return c