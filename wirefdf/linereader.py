"""Buffered reading of a stream one line at a time."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

BUFFER_SIZE = 100


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream in fixed-size chunks.

    Each line keeps its trailing newline; a last line without one is
    returned as it is.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._eof = False

    def _newline(self) -> AnyStr:
        assert self._pending is not None
        return b"\n" if isinstance(self._pending, bytes) else "\n"  # type: ignore[return-value]

    def _fill(self) -> None:
        while not self._eof and (
            self._pending is None or self._newline() not in self._pending
        ):
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
            elif self._pending is None:
                self._pending = chunk
            else:
                self._pending += chunk

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        if not self._pending:
            return None
        index = self._pending.find(self._newline())
        if index < 0:
            line = self._pending
            self._pending = self._pending[:0]
        else:
            line = self._pending[:index + 1]
            self._pending = self._pending[index + 1:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line