"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Optional, Protocol

BUFFER_SIZE = 1024


class _Readable(Protocol[AnyStr]):
    def read(self, size: int = ...) -> AnyStr: ...


class LineReader(Generic[AnyStr]):
    """Pulls lines from ``stream``, reading ``buffer_size`` units at a time.

    Each line keeps its trailing newline; a final line without one is
    returned as it is. Text and binary streams are both accepted.
    """

    def __init__(self, stream: _Readable[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._remainder: Optional[AnyStr] = None

    def _take_line(self, end: int) -> AnyStr:
        assert self._remainder is not None
        line = self._remainder[:end]
        self._remainder = self._remainder[end:]
        return line

    def read_line(self) -> Optional[AnyStr]:
        """The next line, or None once the stream is exhausted."""
        if self._remainder:
            index = self._remainder.find(_newline(self._remainder))
            if index >= 0:
                return self._take_line(index + 1)
        try:
            while True:
                chunk = self.stream.read(self.buffer_size)
                if not chunk:
                    break
                if self._remainder is None:
                    self._remainder = chunk
                    searched_from = 0
                else:
                    searched_from = len(self._remainder)
                    self._remainder = self._remainder + chunk
                index = self._remainder.find(_newline(chunk), searched_from)
                if index >= 0:
                    return self._take_line(index + 1)
        except BaseException:
            self._remainder = None
            raise
        line, self._remainder = self._remainder, None
        return line or None

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.read_line, None)


def _newline(sample):
    return b"\n" if isinstance(sample, (bytes, bytearray)) else "\n"


def read_lines(stream: _Readable[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream``, newlines kept."""
    yield from LineReader(stream, buffer_size)