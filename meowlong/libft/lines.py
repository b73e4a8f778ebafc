"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Return successive lines of ``stream``, each with its newline kept.

    Works on text and binary streams alike; lines have the stream's type.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._newline: AnyStr | None = None

    def _fill(self) -> None:
        while True:
            pending = self._pending
            if pending is not None and self._newline is not None and self._newline in pending:
                return
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            if self._newline is None:
                self._newline = "\n" if isinstance(chunk, str) else b"\n"
            self._pending = chunk if pending is None else pending + chunk

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        pending = self._pending
        if not pending or self._newline is None:
            return None
        index = pending.find(self._newline)
        if index < 0:
            line, self._pending = pending, pending[:0]
        else:
            line, self._pending = pending[: index + 1], pending[index + 1 :]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def iter_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` read ``buffer_size`` units at a time."""
    yield from LineReader(stream, buffer_size)