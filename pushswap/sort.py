"""Sorting strategies over ranked stacks, emitting moves as they go."""

from __future__ import annotations

from pushswap.parsing import is_array_sorted
from pushswap.stacks import Stacks

_HIGHEST_OF_FIVE = 4


def sort_three(stacks: Stacks) -> None:
    """Sort three ranked values held in ``a``."""
    highest = max(stacks.a)
    if stacks.a[0] == highest:
        stacks.rotate_a()
    elif stacks.a[1] == highest:
        stacks.reverse_rotate_a()
    if not is_array_sorted(stacks.a):
        stacks.swap_a()


def sort_four_to_five(stacks: Stacks) -> None:
    """Sort four or five values ranked from 0 held in ``a``."""
    while len(stacks.b) <= 1:
        if stacks.a[0] in (0, 1):
            stacks.push_b()
        else:
            stacks.rotate_a()
    if stacks.b[0] == 0:
        stacks.swap_b()
    if len(stacks.a) < 3 or stacks.a[2] != _HIGHEST_OF_FIVE:
        if stacks.a[0] == _HIGHEST_OF_FIVE:
            stacks.rotate_a()
        else:
            stacks.reverse_rotate_a()
    if stacks.a[0] > stacks.a[1]:
        stacks.swap_a()
    stacks.push_a()
    stacks.push_a()


def radix_sort(stacks: Stacks) -> None:
    """Binary radix sort of non-negative ranks in ``a`` using ``b`` as bucket."""
    bit_count = len(stacks.a).bit_length()
    for bit in range(bit_count + 1):
        for _ in range(len(stacks.a)):
            if is_array_sorted(stacks.a):
                break
            if (stacks.a[0] >> bit) & 1 == 0:
                stacks.push_b()
            else:
                stacks.rotate_a()
        while stacks.b:
            stacks.push_a()