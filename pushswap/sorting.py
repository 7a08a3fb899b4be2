"""Strategies that sort stack ``a`` using only the puzzle's moves."""

from __future__ import annotations

from bisect import bisect_left
from itertools import pairwise
from typing import Iterable, Sequence

from .stacks import PushSwap


def assign_index(values: Sequence[int]) -> list[int]:
    """Give each value its rank: how many values are strictly smaller."""
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]


def max_bits(indices: Iterable[int]) -> int:
    """Number of bits needed to write the largest index."""
    return max(indices, default=0).bit_length()


def is_sorted(values: Iterable[int]) -> bool:
    """Tell whether the values never decrease from top to bottom."""
    return all(first <= second for first, second in pairwise(values))


def smallest_position(values: Sequence[int]) -> int:
    """Position of the first occurrence of the smallest value."""
    if not values:
        raise ValueError("no values to search")
    return min(range(len(values)), key=values.__getitem__)


def push_smallest_top(machine: PushSwap) -> None:
    """Rotate ``a`` the shorter way until its smallest value is on top."""
    size = len(machine.a)
    if size < 2:
        return
    position = smallest_position(list(machine.a))
    if position <= size // 2:
        for _ in range(position):
            machine.ra()
    else:
        for _ in range(size - position):
            machine.rra()


def sort_three(machine: PushSwap) -> None:
    """Sort exactly three values in ``a`` with at most two moves."""
    values = list(machine.a)
    if len(values) != 3:
        raise ValueError("sort_three needs exactly three values")
    one, two, three = values
    if one > two and two < three and three > one:
        machine.sa()
    elif one > two and two > three:
        machine.sa()
        machine.rra()
    elif one > two and two < three and three < one:
        machine.ra()
    elif one < two and two > three and three > one:
        machine.sa()
        machine.ra()
    elif one < two and two > three and three < one:
        machine.rra()


def sort_four(machine: PushSwap) -> None:
    """Sort four values by parking the smallest on ``b``."""
    push_smallest_top(machine)
    machine.pb()
    sort_three(machine)
    machine.pa()


def sort_five(machine: PushSwap) -> None:
    """Sort five values by parking the two smallest on ``b``."""
    push_smallest_top(machine)
    machine.pb()
    push_smallest_top(machine)
    machine.pb()
    sort_three(machine)
    machine.pa()
    machine.pa()


def radix_sort(machine: PushSwap) -> None:
    """Binary radix sort of ``a`` on the ranks of its values."""
    values = list(machine.a)
    indices = assign_index(values)
    rank = dict(zip(values, indices))
    size = len(values)
    for bit in range(max_bits(indices)):
        for _ in range(size):
            top = next(iter(machine.a))
            if (rank[top] >> bit) & 1:
                machine.ra()
            else:
                machine.pb()
        while machine.b:
            machine.pa()


def sort(machine: PushSwap) -> None:
    """Pick the strategy that suits the size of ``a`` and run it."""
    size = len(machine.a)
    if size == 2:
        first, second = machine.a
        if first > second:
            machine.sa()
    elif size == 3:
        sort_three(machine)
    elif size == 4:
        sort_four(machine)
    elif size == 5:
        sort_five(machine)
    else:
        radix_sort(machine)