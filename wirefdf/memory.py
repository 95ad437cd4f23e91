"""Byte buffer helpers working on bytearray and bytes-like objects."""

from __future__ import annotations

import sys
from typing import Any


def _check(buffer: Any, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(buffer):
        raise IndexError(f"{name} holds {len(buffer)} bytes, {n} requested")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first *n* bytes of *buffer* to zero."""
    _check(buffer, n)
    buffer[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zero-filled buffer of *nmemb* elements of *size* bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    total = nmemb * size
    if total > sys.maxsize:
        raise MemoryError("requested allocation is too large")
    return bytearray(total)


def memchr(buffer: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to *c* in the first *n* bytes."""
    _check(buffer, n)
    index = bytes(buffer[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Compare the first *n* bytes; return the difference at the first mismatch."""
    _check(first, n, "first")
    _check(second, n, "second")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy *n* bytes from *src* to the start of *dest*; return *dest*."""
    _check(dest, n, "dest")
    _check(src, n, "src")
    dest[:n] = src[:n]
    return dest


def memmove(dest: bytearray, dest_start: int, src_start: int, n: int) -> bytearray:
    """Move *n* bytes within *dest*, overlap-safe; return *dest*."""
    if dest_start < 0 or src_start < 0:
        raise ValueError("offsets must not be negative")
    _check(dest, dest_start + n, "dest")
    _check(dest, src_start + n, "dest")
    dest[dest_start:dest_start + n] = bytes(dest[src_start:src_start + n])
    return dest


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first *n* bytes of *buffer* with the byte *c*; return *buffer*."""
    _check(buffer, n)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def swap(a: Any, b: Any) -> tuple[Any, Any]:
    """Return the two values in exchanged order."""
    return b, a