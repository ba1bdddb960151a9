"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %.

A conversion letter outside that set prints nothing and uses no argument.
``%%`` prints a percent sign without using an argument.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_MASK = 2**32 - 1
_INT_MIN = -(2**31)


def to_base(number: int, digits: str) -> str:
    """Write a non-negative integer using the given digit alphabet."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    base = len(digits)
    out = []
    while True:
        number, rest = divmod(number, base)
        out.append(digits[rest])
        if number == 0:
            break
    return "".join(reversed(out))


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int argument, got {type(value).__name__}")
    return value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value) & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _format_ptr(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    if address < 0:
        raise ValueError(f"an address must not be negative, got {address}")
    return "0x" + to_base(address, HEX_LOWER)


def _format_signed(value: Any) -> str:
    number = (_as_int(value) - _INT_MIN) % 2**32 + _INT_MIN
    if number < 0:
        return "-" + to_base(-number, DECIMAL)
    return to_base(number, DECIMAL)


def _format_unsigned(value: Any) -> str:
    return to_base(_as_int(value) & _UINT_MASK, DECIMAL)


def _format_hex_lower(value: Any) -> str:
    return to_base(_as_int(value) & _UINT_MASK, HEX_LOWER)


def _format_hex_upper(value: Any) -> str:
    return to_base(_as_int(value) & _UINT_MASK, HEX_UPPER)


_HANDLERS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "p": _format_ptr,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
            continue
        handler = _HANDLERS.get(spec)
        if handler is None:
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        yield handler(value)


def format_string(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted arguments."""
    if fmt is None:
        raise TypeError("format must not be None")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to file (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)