"""Command that reads instructions from standard input and checks that they sort the numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from pushswap.parsing import InputError, check_duplicates, parse_arguments
from pushswap.stacks import Operation, Stacks


def parse_instruction(line: str) -> Operation:
    """Read one instruction line, which must be a known name followed by a newline."""
    name, newline, rest = line.partition("\n")
    if not newline or rest:
        raise InputError(f"instruction not terminated by a newline: {line!r}")
    try:
        return Operation(name)
    except ValueError:
        raise InputError(f"unknown instruction: {name!r}") from None


def read_instructions(stream: Iterable[str]) -> Iterator[Operation]:
    """Yield the instructions of a stream one line at a time."""
    for line in stream:
        yield parse_instruction(line)


def check(values: Iterable[int], lines: Iterable[Operation | str]) -> bool:
    """Apply the instructions to ``values`` and tell whether ``a`` ends up sorted.

    Items that are already operations are applied as they are; any other
    item is read as an instruction line.
    """
    stacks = Stacks(check_duplicates(values))
    for item in lines:
        operation = item if isinstance(item, Operation) else parse_instruction(item)
        stacks.apply(operation)
    return stacks.is_sorted()


def main(argv: Sequence[str] | None = None) -> int:
    """Write ``OK`` or ``KO`` to stderr; report bad input as ``ERROR``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args, digits_only=True)
        verdict = check(values, read_instructions(sys.stdin))
    except InputError:
        print("ERROR", file=sys.stderr)
        return 0
    sys.stderr.write("OK" if verdict else "KO")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())