"""The two stacks of the puzzle and the moves allowed on them."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, List, Optional, Sequence, TextIO


class Stacks:
    """Stacks ``a`` and ``b``, top of each at index 0.

    Every move that changes a stack is recorded in ``operations`` and, when
    an output stream is given, written to it as one line.
    """

    def __init__(self, values: Iterable[int], out: Optional[TextIO] = None) -> None:
        self.a: List[int] = list(values)
        self.b: List[int] = []
        self.out = out
        self.operations: List[str] = []

    def _emit(self, name: str) -> None:
        self.operations.append(name)
        if self.out is not None:
            self.out.write(name + "\n")

    def _swap(self, stack: List[int], name: str) -> None:
        if len(stack) < 2:
            return
        stack[0], stack[1] = stack[1], stack[0]
        self._emit(name)

    def swap_a(self) -> None:
        """Exchange the two top elements of ``a`` (``sa``)."""
        self._swap(self.a, "sa")

    def swap_b(self) -> None:
        """Exchange the two top elements of ``b`` (``sb``)."""
        self._swap(self.b, "sb")

    def push_a(self) -> None:
        """Move the top of ``b`` onto ``a`` (``pa``); nothing if ``b`` is empty."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        self._emit("pa")

    def push_b(self) -> None:
        """Move the top of ``a`` onto ``b`` (``pb``); nothing if ``a`` is empty."""
        if not self.a:
            return
        self.b.insert(0, self.a.pop(0))
        self._emit("pb")

    def rotate_a(self) -> None:
        """Move the top of ``a`` to its bottom (``ra``)."""
        if not self.a:
            return
        self.a.append(self.a.pop(0))
        self._emit("ra")

    def reverse_rotate_a(self) -> None:
        """Move the bottom of ``a`` to its top (``rra``)."""
        if not self.a:
            return
        self.a.insert(0, self.a.pop())
        self._emit("rra")


def index_stack(values: Sequence[int]) -> List[int]:
    """Replace each value by the number of values smaller than it."""
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]