"""String utilities: length, bounded copy and concatenation, search,
comparison, number conversion, slicing, trimming, splitting and mapping.

Strings follow C-string rules: a NUL character ends the text, so anything
after the first ``"\\0"`` is ignored. The bounded copy functions write into a
``bytearray`` and always leave it NUL-terminated.
"""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Callable, List, MutableSequence, Optional, Union

from .output import INT_MAX, INT_MIN

Char = Union[int, str]
Source = Union[str, bytes, bytearray, memoryview]

_ATOI = re.compile(r"[\t\n\x0b\x0c\r ]*([+-]?)([0-9]*)")
_INT_RANGE = 2**32


def _check_count(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")


def _text(s: str) -> str:
    """Return *s* cut at its first NUL, rejecting anything that is not a str."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _as_bytes(src: Source) -> bytes:
    if isinstance(src, str):
        return src.encode("utf-8")
    if isinstance(src, (bytes, bytearray, memoryview)):
        return bytes(src)
    raise TypeError(f"expected str or bytes, got {type(src).__name__}")


def _require_room(dst: bytearray, needed: int) -> None:
    if len(dst) < needed:
        raise IndexError(
            f"destination of length {len(dst)} cannot hold {needed} bytes"
        )


def _target(c: Char) -> str:
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str) and len(c) == 1:
        return c
    raise ValueError(f"expected a character code or a single character, got {c!r}")


def strlen(s: Source) -> int:
    """Return the length of *s* up to its first NUL, or its whole length."""
    if isinstance(s, str):
        end = s.find("\0")
    elif isinstance(s, (bytes, bytearray, memoryview)):
        end = bytes(s).find(0)
    else:
        raise TypeError(f"expected str or bytes, got {type(s).__name__}")
    return len(s) if end < 0 else end


def strlcpy(dst: bytearray, src: Source, size: int) -> int:
    """Copy at most ``size - 1`` bytes of *src* into *dst* and NUL-terminate it.

    Returns the length of *src*; a result of at least *size* means the copy
    was truncated.
    """
    _check_count(size, "size")
    data = _as_bytes(src)
    src_len = strlen(data)
    if size == 0:
        return src_len
    n = min(src_len, size - 1)
    _require_room(dst, n + 1)
    dst[:n] = data[:n]
    dst[n] = 0
    return src_len


def strlcat(dst: bytearray, src: Source, size: int) -> int:
    """Append *src* to the NUL-terminated text in *dst*, keeping the total under *size*.

    Returns the length the full concatenation would have; when *dst* already
    holds *size* or more bytes it is left alone and ``len(src) + size`` is
    returned.
    """
    _check_count(size, "size")
    data = _as_bytes(src)
    src_len = strlen(data)
    if size == 0:
        return src_len
    dst_len = strlen(dst)
    if dst_len >= size:
        return src_len + size
    n = min(src_len, size - 1 - dst_len)
    _require_room(dst, dst_len + n + 1)
    dst[dst_len:dst_len + n] = data[:n]
    dst[dst_len + n] = 0
    return dst_len + src_len


def strchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the first occurrence of *c* in *s*, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    end = strlen(s)
    target = _target(c)
    if target == "\0":
        return end
    pos = s.find(target, 0, end)
    return None if pos < 0 else pos


def strrchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the last occurrence of *c* in *s*, or ``None``."""
    end = strlen(s)
    target = _target(c)
    if target == "\0":
        return end
    pos = s.rfind(target, 0, end)
    return None if pos < 0 else pos


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the difference of the first pair of character codes that differ,
    or 0 when the compared parts are equal.
    """
    _check_count(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find *little* lying wholly within the first *length* characters of *big*.

    Returns its index, 0 for an empty *little*, or ``None`` when absent.
    """
    _check_count(length, "length")
    needle = _text(little)
    if not needle:
        return 0
    pos = big.find(needle, 0, min(length, strlen(big)))
    return None if pos < 0 else pos


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one sign is accepted, and parsing stops at
    the first non-digit. Anything unparsable gives 0. The result wraps around
    like a 32-bit signed integer.
    """
    sign, digits = _ATOI.match(_text(s)).groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return (value - INT_MIN) % _INT_RANGE + INT_MIN


def strdup(s: str) -> str:
    """Return a copy of *s* up to its terminator."""
    return _text(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* beginning at *start*.

    A *start* past the end gives an empty string.
    """
    _check_count(start, "start")
    _check_count(length, "length")
    text = _text(s)
    if start > len(text) or length == 0:
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of *s1* and *s2*."""
    return _text(s1) + _text(s2)


def strtrim(s: str, chars: Optional[str]) -> str:
    """Strip characters found in *chars* from both ends of *s*.

    When *chars* is ``None`` the string is returned unchanged.
    """
    text = _text(s)
    if chars is None:
        return text
    return text.strip(_text(chars))


def split(s: str, delimiter: str) -> List[str]:
    """Split *s* on *delimiter*, dropping the empty pieces between repeated delimiters."""
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    return [word for word in _text(s).split(delimiter) if word]


def itoa(n: int) -> str:
    """Return the decimal form of the 32-bit signed integer *n*."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed integer range")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for every character of *s*."""
    if not callable(f):
        raise TypeError("f must be callable")
    return "".join(f(index, char) for index, char in enumerate(_text(s)))


def striteri(buf: MutableSequence, f: Callable) -> None:
    """Call ``f(index, item)`` on every item of *buf* before its terminator.

    *buf* is a ``bytearray`` (ended by a 0 byte) or a list of characters
    (ended by ``"\\0"``). A result other than ``None`` replaces the item in place.
    """
    if not callable(f):
        raise TypeError("f must be callable")
    terminator = 0 if isinstance(buf, (bytearray, memoryview)) else "\0"
    for index, item in enumerate(buf):
        if item == terminator:
            break
        result = f(index, item)
        if result is not None:
            buf[index] = result