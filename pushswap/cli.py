"""Command line entry: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from pushswap.parsing import InputError, is_array_sorted, is_duplicate, parse_numbers
from pushswap.sort import radix_sort, sort_four_to_five, sort_three
from pushswap.stacks import Stacks, index_stack


def solve(values: Sequence[int]) -> List[str]:
    """Moves that sort ``values`` in stack ``a``; none if already sorted."""
    if is_duplicate(values):
        raise ValueError("values must be distinct")
    if is_array_sorted(values):
        return []
    stacks = Stacks(index_stack(values))
    size = len(stacks.a)
    if size == 2:
        stacks.rotate_a()
    elif size == 3:
        sort_three(stacks)
    elif 4 <= size <= 5:
        sort_four_to_five(stacks)
    else:
        radix_sort(stacks)
    return stacks.operations


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments, print the moves one per line, return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        values = parse_numbers(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    for operation in solve(values):
        sys.stdout.write(operation + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())