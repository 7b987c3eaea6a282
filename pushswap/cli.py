"""Command that prints the instructions sorting the numbers it is given."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one instruction per line; report bad input as ``ERROR`` on stderr."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        operations = solve(parse_arguments(args))
    except InputError:
        print("ERROR", file=sys.stderr)
        return 0
    sys.stdout.write("".join(f"{operation.value}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())