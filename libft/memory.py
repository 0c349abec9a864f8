"""Byte-buffer primitives: fill, copy, search, compare and allocate."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def _check_span(buf, offset: int, n: int, what: str) -> None:
    if offset < 0 or offset + n > len(buf):
        raise IndexError(
            f"{what}: span [{offset}, {offset + n}) outside buffer of length {len(buf)}"
        )


def memset(buf, c: int, n: int):
    """Fill the first *n* bytes of *buf* with ``c & 0xFF`` and return *buf*."""
    _check_count(n)
    _check_span(buf, 0, n, "memset")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Zero the first *n* bytes of *buf*."""
    memset(buf, 0, n)


def memcpy(dest, src, n: int):
    """Copy *n* bytes from *src* to the start of *dest* and return *dest*.

    When both *dest* and *src* are ``None`` nothing happens and ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    _check_count(n)
    _check_span(src, 0, n, "memcpy source")
    _check_span(dest, 0, n, "memcpy destination")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf, dest_offset: int, src_offset: int, n: int):
    """Copy *n* bytes inside *buf* from *src_offset* to *dest_offset*.

    The regions may overlap; the result is as if the source were copied out
    first. Returns *buf*.
    """
    if buf is None:
        return None
    _check_count(n)
    _check_span(buf, src_offset, n, "memmove source")
    _check_span(buf, dest_offset, n, "memmove destination")
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(data, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c & 0xFF`` among the first *n*, or ``None``."""
    _check_count(n)
    _check_span(data, 0, n, "memchr")
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(s1, s2, n: int) -> int:
    """Compare the first *n* bytes as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n)
    _check_span(s1, 0, n, "memcmp first operand")
    _check_span(s2, 0, n, "memcmp second operand")
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zero-filled buffer of *nmemb* elements of *size* bytes.

    Raises ``OverflowError`` when the total would exceed the platform's
    maximum object size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if nmemb > SIZE_MAX // size:
        raise OverflowError(f"{nmemb} * {size} bytes exceeds the addressable size")
    try:
        return bytearray(nmemb * size)
    except (OverflowError, MemoryError) as exc:
        raise MemoryError(f"cannot allocate {nmemb * size} bytes") from exc