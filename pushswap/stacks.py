"""The two stacks and the instructions that move numbers between them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(str, Enum):
    """An instruction, named as it is written in an instruction listing."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


class Stacks:
    """Stacks ``a`` and ``b``; index 0 of each deque is the top.

    Every operation applied is appended to ``history``. An operation on a
    stack too small for it leaves that stack unchanged.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.history: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        if len(stack) >= 2:
            first = stack.popleft()
            second = stack.popleft()
            stack.appendleft(first)
            stack.appendleft(second)

    @staticmethod
    def _rotate(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack.rotate(1)

    @staticmethod
    def _push(source: deque[int], target: deque[int]) -> None:
        if source:
            target.appendleft(source.popleft())

    def apply(self, operation: Operation | str) -> None:
        """Carry out one operation and record it."""
        op = Operation(operation)
        if op is Operation.SA:
            self._swap(self.a)
        elif op is Operation.SB:
            self._swap(self.b)
        elif op is Operation.SS:
            self._swap(self.a)
            self._swap(self.b)
        elif op is Operation.PA:
            self._push(self.b, self.a)
        elif op is Operation.PB:
            self._push(self.a, self.b)
        elif op is Operation.RA:
            self._rotate(self.a)
        elif op is Operation.RB:
            self._rotate(self.b)
        elif op is Operation.RR:
            self._rotate(self.a)
            self._rotate(self.b)
        elif op is Operation.RRA:
            self._reverse_rotate(self.a)
        elif op is Operation.RRB:
            self._reverse_rotate(self.b)
        else:
            self._reverse_rotate(self.a)
            self._reverse_rotate(self.b)
        self.history.append(op)

    def run(self, operations: Iterable[Operation | str]) -> Stacks:
        """Carry out a sequence of operations in order; returns ``self``."""
        for operation in operations:
            self.apply(operation)
        return self

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` is strictly ascending from the top."""
        if self.b:
            return False
        values = list(self.a)
        return all(low < high for low, high in zip(values, values[1:]))