"""A doubly linked list of nodes carrying environment-style metadata."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """A list element: its content plus the bookkeeping fields a node carries."""

    content: Any = None
    key_env: str | None = None
    exp: int = 0
    interro: int = 0
    index: int = 0
    next: Node | None = field(default=None, repr=False)
    prev: Node | None = field(default=None, repr=False)


class LinkedList:
    """A list of :class:`Node` objects linked through ``next`` and ``prev``."""

    def __init__(self) -> None:
        self.head: Node | None = None

    def __iter__(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def last(self) -> Node | None:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self:
            pass
        return tail

    def add_back(self, node: Node) -> None:
        """Append ``node``, resetting its ``interro`` flag and linking ``prev``."""
        node.interro = 0
        tail = self.last()
        if tail is None:
            node.prev = None
            self.head = node
        else:
            node.prev = tail
            node.next = None
            tail.next = node

    def add_front(self, node: Node) -> None:
        """Put ``node`` at the head of the list."""
        node.next = self.head
        self.head = node

    def clear(self, delete: Callable[[Any], object] | None) -> None:
        """Pass every content to ``delete`` and empty the list; no-op without ``delete``."""
        if delete is None:
            return
        node = self.head
        while node is not None:
            following = node.next
            delete(node.content)
            node.next = None
            node.prev = None
            node = following
        self.head = None

    def iterate(self, f: Callable[[Any], object]) -> None:
        """Call ``f`` on the content of each node in order."""
        for node in self:
            f(node.content)

    def map(
        self,
        f: Callable[[Any], Any] | None,
        delete: Callable[[Any], object] | None,
    ) -> LinkedList:
        """Build a new list from ``f(content)`` of each node.

        If ``f`` raises part way, the contents built so far are passed to
        ``delete`` and the error propagates.
        """
        if f is None or delete is None:
            raise TypeError("both a mapping function and a delete function are required")
        result = LinkedList()
        try:
            for node in self:
                result.add_back(Node(f(node.content)))
        except Exception:
            result.clear(delete)
            raise
        return result