"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 6

Text = Union[str, bytes]


def _find_newline(data: Text) -> int:
    """Index of the first newline in data, or -1 when there is none."""
    newline: Text = "\n" if isinstance(data, str) else b"\n"
    return data.find(newline)  # type: ignore[arg-type]


class LineReader:
    """Return the lines of a text or binary stream one by one.

    The stream is read in chunks of buffer_size; data read past the end of a
    line is kept for the next call. Lines keep their trailing newline, except
    a last line that has none.
    """

    def __init__(self, stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if stream is None:
            raise TypeError("a stream to read from is required")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: Optional[Text] = None

    def read_line(self) -> Optional[Text]:
        """The next line, or None when the stream is exhausted.

        A read error discards any pending data and propagates.
        """
        pending = self._pending
        while pending is None or _find_newline(pending) < 0:
            try:
                chunk = self.stream.read(self.buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        index = _find_newline(pending)
        if index < 0:
            self._pending = None
            return pending
        line, rest = pending[: index + 1], pending[index + 1 :]
        self._pending = rest or None
        return line

    def reset(self) -> None:
        """Discard any data read ahead but not yet returned."""
        self._pending = None

    def __iter__(self) -> Iterator[Text]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line