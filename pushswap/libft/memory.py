"""Byte-buffer helpers: fill, search, compare and copy."""

from __future__ import annotations

from typing import Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_span(buffer: ReadableBuffer, start: int, count: int) -> None:
    if count < 0 or start < 0 or start + count > len(buffer):
        raise IndexError("span lies outside the buffer")


def fill(buffer: WritableBuffer, value: int, count: int) -> WritableBuffer:
    """Set the first ``count`` bytes to ``value`` truncated to a byte."""
    _check_span(buffer, 0, count)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def zero(buffer: WritableBuffer, count: int) -> None:
    """Set the first ``count`` bytes to zero."""
    fill(buffer, 0, count)


def allocate(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def find_byte(buffer: ReadableBuffer, value: int, count: int) -> int | None:
    """Offset of the first byte equal to ``value`` within ``count`` bytes."""
    _check_span(buffer, 0, count)
    position = bytes(buffer[:count]).find(value & 0xFF)
    return None if position < 0 else position


def compare(first: ReadableBuffer, second: ReadableBuffer, count: int) -> int:
    """Difference of the first unequal bytes within ``count``, or 0."""
    _check_span(first, 0, count)
    _check_span(second, 0, count)
    for left, right in zip(bytes(first[:count]), bytes(second[:count])):
        if left != right:
            return left - right
    return 0


def copy(
    destination: WritableBuffer, source: ReadableBuffer, count: int
) -> WritableBuffer | None:
    """Copy ``count`` bytes; returns None when both are the same buffer."""
    if destination is source:
        return None
    _check_span(destination, 0, count)
    _check_span(source, 0, count)
    destination[:count] = source[:count]
    return destination


def move(
    buffer: WritableBuffer, destination: int, source: int, count: int
) -> WritableBuffer:
    """Copy ``count`` bytes inside one buffer; overlapping spans are safe."""
    if count == 0 or destination == source:
        return buffer
    _check_span(buffer, destination, count)
    _check_span(buffer, source, count)
    buffer[destination : destination + count] = bytes(buffer[source : source + count])
    return buffer