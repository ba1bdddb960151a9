"""Byte-buffer helpers: fill, copy, search, compare and allocate."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf, value: int, n: int):
    """Fill the first n bytes of buf with value (taken modulo 256); return buf."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def memcpy(dest, src, n: int):
    """Copy the first n bytes of src into dest; return dest."""
    _check_length(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest, src, n: int):
    """Copy n bytes from src to dest, correct even if the two overlap; return dest."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memchr(buf, value: int, n: int) -> int | None:
    """Index of the first byte equal to value (mod 256) within n bytes, or None."""
    _check_length(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Difference of the first differing bytes among the first n, or 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if nmemb > SIZE_MAX // size:
        raise OverflowError("requested allocation size overflows")
    return bytearray(nmemb * size)