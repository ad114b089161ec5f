"""Validation of command-line arguments into a list of distinct integers."""

from __future__ import annotations

from typing import List, Sequence

from pushswap.libft.chars import is_digit
from pushswap.libft.convert import atoi, atol, split

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


class InputError(ValueError):
    """The arguments do not describe a valid list of integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def has_overflow(text: str) -> bool:
    """True when the number in ``text`` lies outside the 32-bit signed range."""
    value = atol(text)
    return value > INT_MAX or value < INT_MIN


def _has_only_digits(text: str) -> bool:
    body = text[1:] if text[:1] in ("-", "+") and len(text) > 1 else text
    return all(is_digit(ch) for ch in body)


def is_valid(args: Sequence[str]) -> bool:
    """True when every argument is a signed decimal that fits 32 bits."""
    return all(_has_only_digits(arg) and not has_overflow(arg) for arg in args)


def _is_only_spaces(text: str) -> bool:
    return all(ord(ch) <= 32 for ch in text)


def get_args(argv: Sequence[str]) -> List[str]:
    """Split the arguments on spaces into one flat list of words.

    An argument that is empty or holds only blank and control characters
    raises :class:`InputError`.
    """
    for arg in argv:
        if _is_only_spaces(arg):
            raise InputError()
    return split(" ".join(argv), " ") or []


def is_duplicate(values: Sequence[int]) -> bool:
    """True when some value occurs more than once."""
    return len(set(values)) != len(values)


def is_array_sorted(values: Sequence[int]) -> bool:
    """True when the values never decrease."""
    return all(a <= b for a, b in zip(values, values[1:]))


def parse_numbers(argv: Sequence[str]) -> List[int]:
    """Integers named by the arguments, which must be at least two and distinct."""
    if not argv or (len(argv) == 1 and not argv[0]):
        raise InputError()
    args = get_args(argv)
    if not is_valid(args) or len(args) < 2:
        raise InputError()
    values = [atoi(arg) for arg in args]
    if is_duplicate(values):
        raise InputError()
    return values