"""String helpers: splitting, searching, copying, trimming and mapping."""

from __future__ import annotations

from typing import Callable, MutableSequence

_NUL = "\0"


def _char(ch: int | str) -> str:
    """Normalise a character given as an int code or a 1-char string."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ch
    return chr(int(ch))


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def split(text: str, sep: int | str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty pieces."""
    return [word for word in text.split(_char(sep)) if word]


def strchr(text: str, ch: int | str) -> int | None:
    """Index of the first *ch* in *text*, or None.

    Searching for the NUL character finds the end of the text.
    """
    target = _char(ch)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of *text*."""
    return "".join(text)


def striteri(
    chars: MutableSequence[str],
    func: Callable[[int, str], str | None] | None,
) -> None:
    """Apply *func* to each character of *chars* in place.

    *func* receives the index and the character; a returned string
    replaces the character, None leaves it unchanged. A missing *func*
    does nothing.
    """
    if func is None:
        return
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dest* within a buffer of *size* characters.

    Returns the resulting text and the length the full concatenation
    would have had (capped at *size* for the *dest* part, as with a
    destination that is not terminated within the buffer).
    """
    _non_negative(size, "size")
    kept = min(len(dest), size)
    room = size - kept
    if room == 0:
        return dest, kept + len(src)
    return dest + src[:room - 1], kept + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters.

    Returns the copied text, truncated to at most ``size - 1``
    characters, and the full length of *src*.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlen(text: str) -> int:
    """Length of *text*."""
    return len(text)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters; return the code difference at the first mismatch."""
    _non_negative(n, "n")
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a == 0 and b == 0:
            break
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Index of *needle* lying wholly within the first *limit* characters.

    An empty *needle* matches at index 0.
    """
    _non_negative(limit, "limit")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def strrchr(text: str, ch: int | str) -> int | None:
    """Index of the last *ch* in *text*, or None.

    Searching for the NUL character finds the end of the text.
    """
    target = _char(ch)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters of *charset* from both ends of *text*."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most *length* characters of *text* from index *start*.

    A start at or past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]