"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One element of a linked list."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> None:
        """Insert ``content`` at the front."""
        self._head = Node(content, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def push_back(self, content: Any) -> None:
        """Append ``content`` at the back."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def last(self) -> Any:
        """Content of the last element; IndexError when the list is empty."""
        if self._tail is None:
            raise IndexError("last() of an empty list")
        return self._tail.content

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every content, front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """New list of ``f(content)`` for every element.

        If ``f`` fails or yields None, the contents mapped so far are passed
        to ``delete`` and a ValueError (or the original error) is raised.
        """
        mapped = LinkedList()
        try:
            for content in self:
                result = f(content)
                if result is None:
                    raise ValueError("mapping function returned None")
                mapped.push_back(result)
        except Exception:
            mapped.clear(delete)
            raise
        return mapped

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every element, passing each content to ``delete`` if given."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following