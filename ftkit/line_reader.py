"""Read a source one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import Any, AnyStr

DEFAULT_BUFFER_SIZE = 3


class LineReader:
    """Return successive lines from a file descriptor or a readable stream.

    The source is read in chunks of ``buffer_size``. Each line keeps its
    trailing newline; the final line is returned without one if the source
    does not end with a newline. An ``int`` source is read with ``os.read``
    and yields ``bytes``; a stream yields whatever its ``read`` returns.
    """

    def __init__(self, source: int | Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an int")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._read: Callable[[int], Any]
        if isinstance(source, int) and not isinstance(source, bool):
            if source < 0:
                raise ValueError(f"file descriptor must not be negative, got {source}")
            fd = source
            self._read = lambda n: os.read(fd, n)
        elif callable(getattr(source, "read", None)):
            self._read = source.read
        else:
            raise TypeError("source must be a file descriptor or have a read method")
        self.buffer_size = buffer_size
        self._stash: Any = None
        self._eol: Any = None

    def _fill(self) -> None:
        """Read chunks into the stash until it holds a newline or the source ends."""
        while self._stash is None or self._eol not in self._stash:
            chunk = self._read(self.buffer_size)
            if not chunk:
                return
            if isinstance(chunk, bytearray):
                chunk = bytes(chunk)
            if self._eol is None:
                self._eol = b"\n" if isinstance(chunk, bytes) else "\n"
            self._stash = chunk if self._stash is None else self._stash + chunk

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the source is exhausted."""
        self._fill()
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        end = stash.find(self._eol)
        if end < 0:
            self._stash = None
            return stash
        line, rest = stash[: end + 1], stash[end + 1 :]
        self._stash = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line