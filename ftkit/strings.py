"""String helpers: measuring, bounded copies, searching, parsing and splitting.

Text functions work on ``str``. The bounded copy functions ``strlcpy`` and
``strlcat`` write into a ``bytearray`` that holds a NUL-terminated string.
Search functions return an index, or ``None`` when nothing is found.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence
from typing import Any

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _char(c: str | int) -> str:
    """Return c as a one-character string; ints are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def _c_bytes(data: bytes | bytearray | str) -> bytes:
    """Return the bytes of data up to, not including, its first NUL."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def _check_buffer(dst: bytearray, size: int) -> None:
    if not isinstance(dst, bytearray):
        raise TypeError("destination must be a bytearray")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer of size {len(dst)}")


def _require(*values: Any) -> None:
    if any(value is None for value in values):
        raise TypeError("argument must not be None")


def strlen(s: str | None) -> int:
    """Length of s; None counts as empty."""
    return 0 if s is None else len(s)


def strlcpy(dst: bytearray, src: bytes | bytearray | str, size: int) -> int:
    """Copy src into dst, writing at most size bytes including the NUL.

    Returns the length of src, so a result >= size means truncation.
    """
    data = _c_bytes(src)
    _check_buffer(dst, size)
    if size:
        piece = data[: size - 1]
        dst[: len(piece)] = piece
        dst[len(piece)] = 0
    return len(data)


def strlcat(dst: bytearray, src: bytes | bytearray | str, size: int) -> int:
    """Append src to the NUL-terminated string in dst, within size bytes.

    Returns the length of the string it tried to build: the length of dst
    (capped at size) plus the length of src.
    """
    data = _c_bytes(src)
    _check_buffer(dst, size)
    end = bytes(dst[:size]).find(0)
    dst_len = size if end < 0 else end
    if dst_len < size:
        piece = data[: size - 1 - dst_len]
        dst[dst_len : dst_len + len(piece)] = piece
        dst[dst_len + len(piece)] = 0
    return dst_len + len(data)


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first c in s; a NUL character matches the end of s."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last c in s; a NUL character matches the end of s."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first mismatch."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of little in the first length characters of big, or None."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return None if index < 0 else index


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 32-bit signed value.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Text with no digits gives 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    value = sign * int(text[start:pos]) if pos > start else 0
    return (value - INT_MIN) % 2**32 + INT_MIN


def substr(s: str | None, start: int, length: int) -> str:
    """Up to length characters of s from start; empty if start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if s is None or start > len(s):
        return ""
    return s[start : start + length]


def strdup(s: str) -> str:
    """Return a copy of s."""
    _require(s)
    return str(s)


def strjoin(s1: str, s2: str) -> str:
    """Concatenate s1 and s2."""
    _require(s1, s2)
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    _require(s, charset)
    return s.strip(charset) if charset else s


def split(s: str | None, sep: str | int) -> list[str]:
    """Split s on the character sep, dropping empty words."""
    ch = _char(sep)
    if s is None:
        return []
    return [word for word in s.split(ch) if word]


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from func(index, char) applied to every character of s."""
    _require(s, func)
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence, func: Callable[[int, Any], Any]) -> None:
    """Replace every item of chars, in place, with func(index, item)."""
    _require(chars, func)
    items: Iterable = list(chars)
    for index, item in enumerate(items):
        chars[index] = func(index, item)