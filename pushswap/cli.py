"""Command line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, read_values, validate
from pushswap.sorting import assign_indices, is_sorted, radix_sort, sort_short
from pushswap.stack import Stacks


def solve(args: Sequence[str]) -> list[str]:
    """Return the operations that sort the numbers held by ``args``.

    Raises InputError when the arguments are not distinct 32-bit integers.
    """
    validate(args)
    stacks = Stacks(read_values(args))
    assign_indices(stacks)
    if is_sorted(stacks.a):
        return []
    if len(stacks.a) <= 5:
        sort_short(stacks)
    else:
        radix_sort(stacks)
    return stacks.operations


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; print "Error" on invalid input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return -1
    try:
        operations = solve(args)
    except InputError as error:
        print(error)
        return 1
    for operation in operations:
        print(operation)
    return 0


if __name__ == "__main__":
    sys.exit(main())