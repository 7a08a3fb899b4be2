"""Character classes, case mapping, integer text conversion and output helpers."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_INT_RANGE = 2**32
_INT_MIN = -(2**31)

_LEADING_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _wrap_int(value: int) -> int:
    """Reduce a value to the range of a signed 32-bit integer, wrapping around."""
    return (value - _INT_MIN) % _INT_RANGE + _INT_MIN


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def atoi(text: str) -> int:
    """Read a leading signed decimal number as a 32-bit integer.

    Leading whitespace is skipped, one sign is accepted, and reading stops at
    the first non-digit. Values beyond the 32-bit range wrap around.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return _wrap_int(-value if sign == "-" else value)


def is_alnum(code: int) -> bool:
    """Tell whether the code is an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_alpha(code: int) -> bool:
    """Tell whether the code is an ASCII letter."""
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_ascii(code: int) -> bool:
    """Tell whether the code lies in the 7-bit ASCII range."""
    return 0 <= code <= 127


def is_digit(code: int) -> bool:
    """Tell whether the code is an ASCII decimal digit."""
    return ord("0") <= code <= ord("9")


def is_print(code: int) -> bool:
    """Tell whether the code is a printable ASCII character, space included."""
    return 32 <= code <= 126


def itoa(number: int) -> str:
    """Write an integer in decimal, with a leading minus when negative."""
    return str(number)


def to_lower(code: int) -> int:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    if ord("A") <= code <= ord("Z"):
        return code + 32
    return code


def to_upper(code: int) -> int:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    if ord("a") <= code <= ord("z"):
        return code - 32
    return code


def put_char(char: str, stream: TextIO | None = None) -> None:
    """Write a single character."""
    if len(char) != 1:
        raise ValueError("put_char expects exactly one character")
    _stream(stream).write(char)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write a string as it is."""
    _stream(stream).write(text)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    _stream(stream).write(f"{text}\n")


def put_number(number: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _stream(stream).write(itoa(number))