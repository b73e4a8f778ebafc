"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO

from meowlong.libft.convert import itoa


def put_char(c: str, stream: TextIO) -> None:
    """Write the single character ``c``."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    stream.write(c)


def put_str(s: str | None, stream: TextIO) -> None:
    """Write ``s``; nothing is written for None."""
    if s is None:
        return
    stream.write(s)


def put_endl(s: str | None, stream: TextIO) -> None:
    """Write ``s`` followed by a newline; nothing is written for None."""
    if s is None:
        return
    stream.write(s + "\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal text of the 32-bit signed integer ``n``."""
    stream.write(itoa(n))