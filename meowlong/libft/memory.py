"""Byte-buffer helpers working on bytearrays and writable memoryviews."""

from __future__ import annotations

import sys
from typing import Union

WritableBuffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: ReadableBuffer) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if length > len(buf):
            raise IndexError(f"length {length} exceeds buffer of size {len(buf)}")


def memset(buf: WritableBuffer, value: int, length: int) -> WritableBuffer:
    """Set the first ``length`` bytes of ``buf`` to ``value`` (as a byte) and return ``buf``."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: WritableBuffer, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def memcpy(dst: WritableBuffer, src: ReadableBuffer, length: int) -> WritableBuffer:
    """Copy ``length`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(dst: WritableBuffer, src: ReadableBuffer, length: int) -> WritableBuffer:
    """Copy ``length`` bytes from ``src`` to ``dst``; the regions may overlap."""
    _check_length(length, dst, src)
    # Taking a snapshot of the source makes overlapping copies safe in either direction.
    snapshot = bytes(src[:length])
    dst[:length] = snapshot
    return dst


def memchr(buf: ReadableBuffer, value: int, length: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(length, buf)
    index = bytes(buf[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, length: int) -> int:
    """Compare ``length`` bytes; return the difference of the first unequal pair, else 0."""
    _check_length(length, a, b)
    for left, right in zip(bytes(a[:length]), bytes(b[:length])):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > sys.maxsize:
        raise OverflowError("requested allocation is too large")
    return bytearray(total)