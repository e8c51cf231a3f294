"""Command line entry: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .minisort import mini_sort
from .operations import Operation, Stacks
from .parsing import InputError, check_duplicates, is_sorted, parse_arguments
from .radix import radix_sort

_MINI_LIMIT = 5


def solve(values: Sequence[int]) -> list[Operation]:
    """Return the operations that sort ``values`` onto stack ``a``.

    Raises InputError if a value is repeated.
    """
    if len(values) <= 1:
        return []
    check_duplicates(values)
    if is_sorted(values):
        return []
    stacks = Stacks(values)
    if len(values) <= _MINI_LIMIT:
        mini_sort(stacks)
    else:
        radix_sort(stacks)
    return stacks.operations


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; print ``Error`` and return 1 on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) <= 1:
        return 0
    try:
        operations = solve(parse_arguments(args))
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())