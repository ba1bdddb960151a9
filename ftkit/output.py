"""Write characters, strings and numbers to a file descriptor."""

from __future__ import annotations

import os

from ftkit.strings import itoa


def _write_all(fd: int, data: bytes) -> None:
    """Write every byte of data to fd, retrying after short writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: str, fd: int) -> None:
    """Write the single character c to fd."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode("utf-8"))


def put_str_fd(s: str | None, fd: int) -> None:
    """Write s to fd; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def put_endl_fd(s: str | None, fd: int) -> None:
    """Write s followed by a newline to fd; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8") + b"\n")


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of the 32-bit signed integer n to fd."""
    _write_all(fd, itoa(n).encode("ascii"))