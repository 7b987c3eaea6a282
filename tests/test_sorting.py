import itertools
import random

import pytest

from pushswap.parsing import InputError
from pushswap.sorting import (
    ranks,
    solve,
    sort_chunks,
    sort_five,
    sort_four,
    sort_three,
    sort_two,
)
from pushswap.stacks import Operation, Stacks


def _replay(values, operations):
    return Stacks(values).run(operations)


def test_ranks_is_a_permutation_preserving_order():
    values = [40, -7, 13, 2**31 - 1, -(2**31 - 1), 0]
    result = ranks(values)
    assert sorted(result) == list(range(len(values)))
    for (x, rx), (y, ry) in itertools.combinations(zip(values, result), 2):
        assert (x < y) == (rx < ry)


def test_sort_two_swaps_descending_pair():
    stacks = Stacks([2, 1])
    sort_two(stacks)
    assert stacks.history == [Operation.SA]
    assert list(stacks.a) == [1, 2]


def test_sort_two_leaves_ascending_pair():
    stacks = Stacks([1, 2])
    sort_two(stacks)
    assert stacks.history == []


def test_sort_three_reverse():
    stacks = Stacks([3, 2, 1])
    sort_three(stacks)
    assert stacks.history == [Operation.RA, Operation.SA]


def test_sort_three_middle_largest():
    stacks = Stacks([2, 3, 1])
    sort_three(stacks)
    assert stacks.history == [Operation.RA, Operation.RA]


@pytest.mark.parametrize("perm", list(itertools.permutations([10, 20, 30])))
def test_sort_three_all_permutations(perm):
    stacks = Stacks(perm)
    sort_three(stacks)
    assert stacks.is_sorted()


@pytest.mark.parametrize("perm", list(itertools.permutations([4, -1, 9, 3])))
def test_sort_four_all_permutations(perm):
    stacks = Stacks(perm)
    sort_four(stacks)
    assert stacks.is_sorted()
    assert _replay(perm, stacks.history).is_sorted()


@pytest.mark.parametrize("perm", list(itertools.permutations([5, 1, 8, -3, 2])))
def test_sort_five_all_permutations(perm):
    stacks = Stacks(perm)
    sort_five(stacks)
    assert stacks.is_sorted()


def test_sort_three_needs_three_values():
    with pytest.raises(ValueError):
        sort_three(Stacks([1, 2]))


def test_sort_chunks_rejects_zero_chunks():
    with pytest.raises(ValueError):
        sort_chunks(Stacks([3, 1, 2, 6, 5, 4]), 0)


@pytest.mark.parametrize("chunk_count", [1, 3, 5, 9, 50])
def test_sort_chunks_sorts(chunk_count):
    rng = random.Random(chunk_count)
    values = rng.sample(range(-1000, 1000), 40)
    stacks = Stacks(values)
    sort_chunks(stacks, chunk_count)
    assert stacks.is_sorted()
    assert sorted(stacks.a) == sorted(values)


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6, 7, 10, 50, 100, 101, 150, 500])
def test_solve_sorts_random_inputs(size):
    rng = random.Random(size)
    for _ in range(3):
        values = rng.sample(range(-10_000, 10_000), size)
        operations = solve(values)
        assert _replay(values, operations).is_sorted()


def test_solve_sorted_input_needs_nothing():
    assert solve([1, 2, 3, 4, 5, 6, 7]) == []
    assert solve([42]) == []


def test_solve_lists_only_effective_operations():
    values = [8, 3, 9, 1, 7, 2, 6, 4, 5, 0]
    operations = solve(values)
    stacks = Stacks(values)
    for operation in operations:
        before = (list(stacks.a), list(stacks.b))
        stacks.apply(operation)
        assert (list(stacks.a), list(stacks.b)) != before


def test_solve_rejects_duplicates():
    with pytest.raises(InputError):
        solve([3, 1, 3])