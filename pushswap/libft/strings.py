"""String helpers: splitting, searching, joining, trimming and bounded copies."""

from __future__ import annotations

from typing import Callable, MutableSequence

from ..parsing import split_words

_NUL = 0


def _terminated_length(data: bytes | bytearray | memoryview) -> int:
    """Length of the text in a buffer, up to its first NUL byte."""
    position = bytes(data).find(_NUL)
    return len(data) if position < 0 else position


def _check_size(destination: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(destination):
        raise IndexError("size exceeds the destination buffer")


def split(text: str, separator: str) -> list[str]:
    """Split on a single character, dropping empty pieces."""
    return split_words(text, separator)


def find_char(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``.

    Searching for ``"\\0"`` finds the end of the text when it holds none.
    """
    position = text.find(char)
    if position >= 0:
        return position
    if char == "\0":
        return len(text)
    return None


def find_last_char(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``; ``"\\0"`` finds the end."""
    if char == "\0":
        return len(text)
    position = text.rfind(char)
    return None if position < 0 else position


def duplicate(text: str) -> str:
    """Return a copy of the text."""
    return "".join(text)


def iterate_indexed(
    chars: MutableSequence[str] | None,
    func: Callable[[int, str], str | None] | None,
) -> None:
    """Call ``func(index, char)`` for each character, in order.

    When ``func`` returns a character, it replaces the one at that index.
    """
    if chars is None or func is None:
        return
    for index, char in enumerate(list(chars)):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def bounded_concat(destination: bytearray, source: bytes, size: int) -> int:
    """Append ``source`` to the NUL-terminated text in ``destination``.

    At most ``size`` bytes of the buffer are used, the terminator included.
    Returns the length of the text it tried to create.
    """
    _check_size(destination, size)
    source_length = _terminated_length(source)
    current = _terminated_length(destination[:size])
    if current == size:
        return size + source_length
    room = size - 1 - current
    copied = min(room, source_length)
    destination[current : current + copied] = source[:copied]
    destination[current + copied] = _NUL
    return current + source_length


def bounded_copy(destination: bytearray, source: bytes, size: int) -> int:
    """Copy ``source`` into ``destination`` using at most ``size`` bytes.

    The copy is always NUL-terminated when ``size`` is positive.
    Returns the length of ``source``.
    """
    _check_size(destination, size)
    source_length = _terminated_length(source)
    if size == 0:
        return source_length
    copied = min(source_length, size - 1)
    destination[:copied] = source[:copied]
    destination[copied] = _NUL
    return source_length


def length(text: str) -> int:
    """Number of characters in the text."""
    return len(text)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def compare_prefix(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the difference of the first unequal character codes, the end of a
    string counting as code 0, or 0 when the prefixes match.
    """
    for index in range(max(count, 0)):
        left = ord(first[index]) if index < len(first) else 0
        right = ord(second[index]) if index < len(second) else 0
        if left != right:
            return left - right
        if left == 0:
            return 0
    return 0


def find_bounded(haystack: str, needle: str, limit: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``limit`` characters."""
    if not needle:
        return 0
    end = min(max(limit, 0), len(haystack))
    position = haystack.find(needle, 0, end)
    return None if position < 0 else position


def trim(text: str | None, charset: str) -> str | None:
    """Strip characters in ``charset`` from both ends."""
    if text is None:
        return None
    return text.strip(charset)


def substring(text: str | None, start: int, count: int) -> str | None:
    """Up to ``count`` characters from ``start``; empty past the end."""
    if text is None:
        return None
    if start < 0 or count < 0:
        raise ValueError("start and count must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + count]