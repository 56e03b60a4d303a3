"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; a final line without one is returned
    as is. Once the stream is exhausted, ``read_line`` returns None.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when nothing is left."""
        while True:
            if self._pending:
                newline = b"\n" if isinstance(self._pending, bytes) else "\n"
                index = self._pending.find(newline)
                if index >= 0:
                    line = self._pending[: index + 1]
                    self._pending = self._pending[index + 1 :]
                    return line
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                rest = self._pending
                self._pending = None
                return rest if rest else None
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream``, reading ``buffer_size`` units at a time."""
    yield from LineReader(stream, buffer_size)