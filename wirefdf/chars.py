"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_SIGNS = frozenset("+-")


def _code(c: int | str) -> int:
    """Return the integer code of a character given as int or 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def atoi(text: str) -> int:
    """Parse the first integer in *text*.

    Leading whitespace and signs are skipped; each '-' flips the sign.
    A sign that is not directly followed by a digit, or a string with no
    digits before another kind of character, yields 0. Parsing stops at
    the first non-digit after the number.
    """
    sign = 1
    value = 0
    lookahead = text[1:] + "\0"
    for ch, nxt in zip(text, lookahead):
        if ch not in _WHITESPACE and ch not in _DIGITS and ch not in _SIGNS:
            break
        if ch in _SIGNS and nxt not in _DIGITS:
            return 0
        if ch == "-":
            sign = -sign
        if ch in _DIGITS:
            value = value * 10 + int(ch)
            if nxt not in _DIGITS:
                return value * sign
    return 0


def itoa(number: int) -> str:
    """Return the decimal representation of *number*."""
    return str(int(number))


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters (space through tilde)."""
    return 32 <= _code(c) <= 126


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII capital letter; other values are returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII small letter; other values are returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code