import random
from itertools import permutations

import pytest

from pushswap.sorting import (
    assign_index,
    is_sorted,
    max_bits,
    push_smallest_top,
    radix_sort,
    smallest_position,
    sort,
    sort_five,
    sort_four,
    sort_three,
)
from pushswap.stacks import Operation, PushSwap


def _check_sorted(machine, values):
    assert list(machine.a) == sorted(values)
    assert len(machine.b) == 0


def test_assign_index_ranks_values():
    values = [42, -7, 13, 0, 99, 5]
    indices = assign_index(values)
    assert sorted(indices) == list(range(len(values)))
    ordered = sorted(values)
    for value, index in zip(values, indices):
        assert ordered[index] == value


def test_assign_index_empty():
    assert assign_index([]) == []


@pytest.mark.parametrize("indices", [[0], [0, 1], [0, 1, 2, 3], [5, 2, 7, 1], list(range(100))])
def test_max_bits_covers_largest_index(indices):
    bits = max_bits(indices)
    largest = max(indices)
    assert largest < 2**bits
    if largest:
        assert largest >= 2 ** (bits - 1)
    else:
        assert bits == 0


def test_is_sorted():
    assert is_sorted([1, 2, 3]) is True
    assert is_sorted([2, 1, 3]) is False
    assert is_sorted([]) is True
    assert is_sorted([7]) is True


def test_smallest_position_finds_first_minimum():
    values = [4, 1, 3, 1, 2]
    position = smallest_position(values)
    assert values[position] == min(values)
    assert min(values) not in values[:position]


def test_smallest_position_empty_raises():
    with pytest.raises(ValueError):
        smallest_position([])


@pytest.mark.parametrize("values", [[3, 1, 2, 5, 4], [2, 3, 4, 5, 1], [1, 2, 3], [5, 4, 3, 2, 1]])
def test_push_smallest_top(values):
    machine = PushSwap(values)
    push_smallest_top(machine)
    assert next(iter(machine.a)) == min(values)
    assert sorted(machine.a) == sorted(values)
    assert set(machine.operations) <= {Operation.RA, Operation.RRA}
    assert len(set(machine.operations)) <= 1
    assert len(machine.operations) <= len(values) // 2 + 1


@pytest.mark.parametrize(
    "values, expected",
    [
        ([2, 1, 3], [Operation.SA]),
        ([3, 2, 1], [Operation.SA, Operation.RRA]),
        ([2, 3, 1], [Operation.RRA]),
    ],
)
def test_sort_three_known_moves(values, expected):
    machine = PushSwap(values)
    sort_three(machine)
    assert machine.operations == expected
    _check_sorted(machine, values)


@pytest.mark.parametrize("values", [list(p) for p in permutations([1, 2, 3])])
def test_sort_three_all_orders(values):
    machine = PushSwap(values)
    sort_three(machine)
    _check_sorted(machine, values)
    assert len(machine.operations) <= 2


def test_sort_three_wrong_size():
    with pytest.raises(ValueError):
        sort_three(PushSwap([1, 2]))


@pytest.mark.parametrize("values", [list(p) for p in permutations([10, 20, 30, 40])])
def test_sort_four_all_orders(values):
    machine = PushSwap(values)
    sort_four(machine)
    _check_sorted(machine, values)


@pytest.mark.parametrize("values", [list(p) for p in permutations([-2, -1, 0, 1, 2])])
def test_sort_five_all_orders(values):
    machine = PushSwap(values)
    sort_five(machine)
    _check_sorted(machine, values)
    assert len(machine.operations) <= 12


@pytest.mark.parametrize("size", [6, 17, 100])
def test_radix_sort_sorts(size):
    rng = random.Random(size)
    values = rng.sample(range(-1000, 1000), size)
    machine = PushSwap(values)
    radix_sort(machine)
    _check_sorted(machine, values)
    assert set(machine.operations) <= {Operation.PA, Operation.PB, Operation.RA}


def test_moves_replay_to_the_same_result():
    rng = random.Random(7)
    values = rng.sample(range(500), 40)
    machine = PushSwap(values)
    sort(machine)
    replay = PushSwap(values)
    for operation in machine.operations:
        replay.apply(operation)
    assert list(replay.a) == sorted(values)


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6, 12])
def test_sort_dispatch_sorts_every_size(size):
    rng = random.Random(size * 31)
    for _ in range(10):
        values = rng.sample(range(-50, 50), size)
        machine = PushSwap(values)
        sort(machine)
        _check_sorted(machine, values)


def test_sort_two_values():
    machine = PushSwap([9, 4])
    sort(machine)
    _check_sorted(machine, [9, 4])
    assert machine.operations == [Operation.SA]