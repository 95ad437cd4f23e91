"""Character, string and number output plus a small printf-style formatter."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _as_int32(number: int) -> int:
    return ((int(number) + 2**31) & _UINT32) - 2**31


def put_char(c: int | str, stream: TextIO | None = None) -> int:
    """Write one character to *stream* (stdout by default); return 1."""
    _target(stream).write(_as_char(c))
    return 1


def put_str(text: str | None, stream: TextIO | None = None) -> int:
    """Write *text*; None is written as ``(null)``. Return the count written."""
    out = "(null)" if text is None else text
    _target(stream).write(out)
    return len(out)


def put_endl(text: str, stream: TextIO | None = None) -> int:
    """Write *text* followed by a newline; return the count written."""
    _target(stream).write(text + "\n")
    return len(text) + 1


def put_nbr(number: int, stream: TextIO | None = None) -> int:
    """Write *number* in decimal; return the count written."""
    out = str(int(number))
    _target(stream).write(out)
    return len(out)


def format_hex(number: int, upper: bool = False) -> str:
    """Hexadecimal digits of *number* taken as a 32-bit unsigned value."""
    digits = format(int(number) & _UINT32, "x")
    return digits.upper() if upper else digits


def format_unsigned(number: int) -> str:
    """Decimal digits of *number* taken as a 32-bit unsigned value."""
    return str(int(number) & _UINT32)


def format_pointer(address: int | None) -> str:
    """Render an address as ``0x...`` lower-case hex, or ``(nil)`` for zero."""
    value = 0 if address is None else int(address) & _UINT64
    if value == 0:
        return "(nil)"
    return "0x" + format(value, "x")


def _conversions(template: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)

    def take() -> Any:
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    chars = iter(template)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec == "c":
            yield _as_char(take())
        elif spec == "s":
            value = take()
            yield "(null)" if value is None else str(value)
        elif spec == "p":
            yield format_pointer(take())
        elif spec in ("d", "i"):
            yield str(_as_int32(take()))
        elif spec == "u":
            yield format_unsigned(take())
        elif spec == "x":
            yield format_hex(take())
        elif spec == "X":
            yield format_hex(take(), upper=True)
        elif spec == "%":
            yield "%"
        # any other conversion character is consumed and produces nothing


def format_printf(template: str, *args: Any) -> str:
    """Format *args* by the conversions c, s, p, d, i, u, x, X and %%."""
    if not template:
        raise ValueError("format string must not be empty")
    return "".join(_conversions(template, args))


def printf(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to *stream*; return the number of characters."""
    text = format_printf(template, *args)
    _target(stream).write(text)
    return len(text)