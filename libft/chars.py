"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a one-character
string. Predicates return ``bool``; the case converters return a value of the
same kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]

_UPPER_FIRST, _UPPER_LAST = ord("A"), ord("Z")
_LOWER_FIRST, _LOWER_LAST = ord("a"), ord("z")
_DIGIT_FIRST, _DIGIT_LAST = ord("0"), ord("9")
_CASE_SHIFT = _LOWER_FIRST - _UPPER_FIRST


def _code(c: Char) -> int:
    """Return the integer code of *c*, validating its form."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return _UPPER_FIRST <= code <= _UPPER_LAST


def _is_lower(code: int) -> bool:
    return _LOWER_FIRST <= code <= _LOWER_LAST


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return _DIGIT_FIRST <= _code(c) <= _DIGIT_LAST


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for a code in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: Char) -> Char:
    """Convert an ASCII lower-case letter to upper case; anything else is returned as is."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_SHIFT
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Convert an ASCII upper-case letter to lower case; anything else is returned as is."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_SHIFT
    return chr(code) if isinstance(c, str) else code