"""Strategies that sort stack ``a`` and the instruction sequence they produce."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from pushswap.parsing import check_duplicates
from pushswap.stacks import Operation, Stacks

_SMALL_STRATEGY_LIMIT = 100
_SMALL_CHUNK_COUNT = 5
_LARGE_CHUNK_COUNT = 9


def _stack_for(stacks: Stacks, operation: Operation):
    if operation in (Operation.SA, Operation.RA, Operation.RRA, Operation.PB):
        return stacks.a
    return stacks.b


def _do(stacks: Stacks, operation: Operation) -> None:
    """Apply an operation only when it has an effect, so that no-ops are not listed."""
    minimum = 1 if operation in (Operation.PA, Operation.PB) else 2
    if len(_stack_for(stacks, operation)) >= minimum:
        stacks.apply(operation)


def _require(stacks: Stacks, count: int) -> None:
    if len(stacks.a) < count:
        raise ValueError(f"stack a needs at least {count} values, has {len(stacks.a)}")


def ranks(values: Sequence[int]) -> list[int]:
    """Return, for each value in order, its index in the sorted sequence."""
    order = {value: index for index, value in enumerate(sorted(values))}
    return [order[value] for value in values]


def sort_two(stacks: Stacks) -> None:
    """Put the two top values of ``a`` in ascending order."""
    _require(stacks, 2)
    a = stacks.a
    if a[0] > a[1]:
        _do(stacks, Operation.SA)


def _first_big(stacks: Stacks) -> None:
    a = stacks.a
    if a[1] < a[2]:
        _do(stacks, Operation.RA)
    elif a[1] > a[2]:
        _do(stacks, Operation.RA)
        _do(stacks, Operation.SA)


def _mid_big(stacks: Stacks) -> None:
    a = stacks.a
    if a[0] > a[2]:
        _do(stacks, Operation.RA)
        _do(stacks, Operation.RA)
    elif a[0] < a[2]:
        _do(stacks, Operation.SA)
        _do(stacks, Operation.RA)


def sort_three(stacks: Stacks) -> None:
    """Sort the three values of ``a``."""
    _require(stacks, 3)
    a = stacks.a
    if a[0] < a[2] and a[1] < a[2]:
        sort_two(stacks)
    if a[0] > a[1] and a[0] > a[2]:
        _first_big(stacks)
    if a[0] < a[1] and a[1] > a[2]:
        _mid_big(stacks)


def _park_smallest(stacks: Stacks, inner: Callable[[Stacks], None]) -> None:
    _do(stacks, Operation.PB)
    inner(stacks)
    _do(stacks, Operation.PA)


def sort_four(stacks: Stacks) -> None:
    """Sort four values: bring the smallest to the top, park it, sort the rest."""
    _require(stacks, 4)
    a = stacks.a
    smallest = min(a)
    if smallest == a[0]:
        _park_smallest(stacks, sort_three)
    if smallest == a[1]:
        _do(stacks, Operation.SA)
        _park_smallest(stacks, sort_three)
    if smallest == a[2]:
        _do(stacks, Operation.RA)
        _do(stacks, Operation.RA)
        _park_smallest(stacks, sort_three)
    if smallest == a[3]:
        _do(stacks, Operation.RRA)
        _park_smallest(stacks, sort_three)


def sort_five(stacks: Stacks) -> None:
    """Sort five values: bring the smallest to the top, park it, sort four."""
    _require(stacks, 5)
    a = stacks.a
    smallest = min(a)
    if smallest == a[0]:
        _park_smallest(stacks, sort_four)
    if smallest == a[1]:
        _do(stacks, Operation.SA)
    if smallest == a[2]:
        _do(stacks, Operation.RA)
        _do(stacks, Operation.RA)
    if smallest == a[3]:
        _do(stacks, Operation.RRA)
        _do(stacks, Operation.RRA)
    if smallest == a[4]:
        _do(stacks, Operation.RRA)
    _park_smallest(stacks, sort_four)


def _find(stack: Iterable[int], target: int, rank: dict[int, int]) -> int:
    """Index of the value of rank ``target``, or the stack's length if absent."""
    values = list(stack)
    return next(
        (index for index, value in enumerate(values) if rank[value] == target),
        len(values),
    )


def _cost(size: int, index: int) -> int:
    return index if index <= size // 2 else size - index + 1


def _push_one(stacks: Stacks, target: int, rank: dict[int, int]) -> None:
    size = len(stacks.b)
    index = _find(stacks.b, target, rank)
    if index <= size // 2:
        for _ in range(index):
            _do(stacks, Operation.RB)
    else:
        for _ in range(size - index):
            _do(stacks, Operation.RRB)
    _do(stacks, Operation.PA)


def _back_to_a(stacks: Stacks, target: int, rank: dict[int, int]) -> None:
    b = stacks.b
    while b:
        size = len(b)
        highest = _cost(size, _find(b, target, rank))
        second = _cost(size, _find(b, target - 1, rank))
        if highest <= second:
            if size > 1:
                _push_one(stacks, target, rank)
            _push_one(stacks, target - 1, rank)
            target -= 2
        elif size >= 2:
            _push_one(stacks, target - 1, rank)
            _push_one(stacks, target, rank)
            target -= 2
            _do(stacks, Operation.SA)
        else:
            _push_one(stacks, target, rank)
            target -= 1


def sort_chunks(stacks: Stacks, chunk_count: int) -> None:
    """Sort ``a`` by pushing it to ``b`` in rank chunks, then back largest first."""
    if chunk_count < 1:
        raise ValueError("chunk_count must be at least 1")
    a = stacks.a
    total = len(a)
    rank = dict(zip(a, ranks(list(a))))
    chunk_size = total // chunk_count
    limit = chunk_size + total % chunk_count
    pushed = 0
    while a and limit <= total:
        if pushed == limit:
            limit += chunk_size
        top = rank[a[0]]
        if top <= limit:
            _do(stacks, Operation.PB)
            if top > limit - chunk_size // 2:
                _do(stacks, Operation.RB)
            pushed += 1
        else:
            _do(stacks, Operation.RA)
    _back_to_a(stacks, total - 1, rank)


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values``; none if already sorted."""
    numbers = check_duplicates(values)
    stacks = Stacks(numbers)
    if stacks.is_sorted():
        return []
    count = len(numbers)
    if count == 2:
        sort_two(stacks)
    elif count == 3:
        sort_three(stacks)
    elif count == 4:
        sort_four(stacks)
    elif count == 5:
        sort_five(stacks)
    elif count <= _SMALL_STRATEGY_LIMIT:
        sort_chunks(stacks, _SMALL_CHUNK_COUNT)
    else:
        sort_chunks(stacks, _LARGE_CHUNK_COUNT)
    return list(stacks.history)