"""Reading a stream one line at a time."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


def _find_newline(data: str | bytes | bytearray) -> int:
    """Index of the first newline in ``data``, or -1 when there is none."""
    if isinstance(data, (bytes, bytearray)):
        return data.find(b"\n")
    return data.find("\n")


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, each with its newline kept."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _fill(self) -> AnyStr | None:
        """Read chunks into the pending data until one holds a newline or the stream ends."""
        data = self._pending
        while True:
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                break
            data = chunk if data is None else data + chunk
            if _find_newline(chunk) >= 0:
                break
        return data

    def read_line(self) -> AnyStr | None:
        """Return the next line, newline included, or None at the end of the stream."""
        data = self._fill()
        if not data:
            self._pending = None
            return None
        cut = _find_newline(data)
        if cut < 0:
            self._pending = None
            return data
        rest = data[cut + 1:]
        self._pending = rest if rest else None
        return data[: cut + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_all(stream: IO[AnyStr]) -> AnyStr | None:
    """Read every line of ``stream`` and join them; None when there is nothing."""
    lines = list(LineReader(stream))
    if not lines:
        return None
    return lines[0][:0].join(lines)