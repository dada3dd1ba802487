"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps its items in insertion order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content before the first node and return the new node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append content after the last node and return the new node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call func on every content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding func applied to every content, in order."""
        return LinkedList(func(content) for content in self)

    def clear(self, on_delete: Optional[Callable[[Any], object]] = None) -> None:
        """Empty the list, passing every content to on_delete first when given."""
        if on_delete is not None:
            for content in self:
                on_delete(content)
        self.head = None