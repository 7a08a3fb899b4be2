"""Reading the command-line numbers into the initial stack."""

from __future__ import annotations

import re
from typing import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """Raised when the program's arguments are not a valid set of integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def atol(text: str) -> int:
    """Read a leading signed decimal number, ignoring what follows it."""
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def is_valid_number(text: str) -> bool:
    """Tell whether the text is a signed decimal that fits a 32-bit int."""
    if not _WHOLE_NUMBER.fullmatch(text):
        return False
    return INT_MIN <= atol(text) <= INT_MAX


def _check_separator(separator: str) -> None:
    if len(separator) != 1:
        raise ValueError("separator must be a single character")


def count_words(text: str, separator: str) -> int:
    """Count the non-empty runs of text between separators."""
    _check_separator(separator)
    return sum(1 for word in text.split(separator) if word)


def split_words(text: str, separator: str) -> list[str]:
    """Split on a single character, dropping empty pieces."""
    _check_separator(separator)
    return [word for word in text.split(separator) if word]


def parse_args(args: Iterable[str]) -> list[int]:
    """Turn the arguments into the values of stack ``a``, top first.

    Each argument may hold several numbers separated by spaces.
    Raises ``InputError`` for anything that is not an integer in range
    and for repeated values.
    """
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        for word in split_words(arg, " "):
            if not is_valid_number(word):
                raise InputError()
            number = atol(word)
            if number in seen:
                raise InputError()
            seen.add(number)
            values.append(number)
    return values