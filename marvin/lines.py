"""Reading a stream one line at a time through a fixed-size read buffer."""

from typing import IO, Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 1024

Chunk = Union[str, bytes]


def _newline(data: Chunk) -> Chunk:
    return b"\n" if isinstance(data, (bytes, bytearray)) else "\n"


class LineReader:
    """Return successive lines from a text or binary stream.

    Each line keeps its trailing newline; the last line of a stream that does
    not end in a newline is returned without one.
    """

    def __init__(self, stream: IO, buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._rest: Optional[Chunk] = None

    def _fill(self) -> Optional[Chunk]:
        rest = self._rest
        while rest is None or _newline(rest) not in rest:
            chunk = self._stream.read(self._buffer_size)
            if rest is None:
                rest = chunk[:0]
            if not chunk:
                break
            rest = rest + chunk
        return rest

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or None when the stream is exhausted."""
        rest = self._fill()
        if not rest:
            self._rest = None
            return None
        end = rest.find(_newline(rest))
        if end < 0:
            self._rest = None
            return rest
        self._rest = rest[end + 1:]
        return rest[:end + 1]

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[Chunk]:
    """Yield the lines of a stream, newlines kept."""
    yield from LineReader(stream, buffer_size)