"""String helpers with C-library semantics, expressed on Python strings.

Positions are returned as indices rather than pointers, and ``None`` stands
for "not found".
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _single_char(c: str) -> str:
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    if _single_char(c) == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    if _single_char(c) == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, with the
    end of a string counting as code 0, or 0 when the prefixes are equal.
    """
    _non_negative(n, "n")
    for index in range(n):
        a = ord(s1[index]) if index < len(s1) else 0
        b = ord(s2[index]) if index < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly within the first ``length`` characters.

    Returns the index of the match or None. An empty needle matches at 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the length of ``src``.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would need.
    When ``size`` does not exceed ``len(dst)`` nothing is appended and the
    length reported is ``size + len(src)``.
    """
    _non_negative(size, "size")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start at or past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str | None, s2: str | None) -> str:
    """Concatenate two strings, treating a missing one as empty."""
    return (s1 or "") + (s2 or "")


def strtrim(s: str | None, charset: str | None) -> str:
    """Strip characters in ``charset`` from both ends of ``s``.

    Trimming from the end never removes the first character; a string made
    only of trimmed characters becomes empty.
    """
    if not s or charset is None:
        return ""
    start = len(s) - len(s.lstrip(charset)) if charset else 0
    end = len(s)
    while end > 1 and s[end - 1] in charset:
        end -= 1
    return s[start:end] if start < end else ""


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on runs of ``sep``, dropping empty pieces."""
    _single_char(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return the string built from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(
    s: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]
) -> None:
    """Call ``func(index, s)`` for each position so it can edit ``s`` in place."""
    for index in range(len(s)):
        func(index, s)