"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that adds at either end and removes from the front."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    @property
    def head(self) -> Optional[Node]:
        """The first node, or None when the list is empty."""
        return self._head

    def push_front(self, content: Any) -> Node:
        """Add ``content`` at the front and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Add ``content`` at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Any:
        """The content of the last node; IndexError when the list is empty."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.content

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first node, pass its content to ``delete`` if given,
        and return the content."""
        node = self._head
        if node is None:
            raise IndexError("pop_front() on an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node from the front, passing each content to ``delete``."""
        while self._head is not None:
            self.pop_front(delete)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """A new list of ``func(content)`` for each content.

        If ``func`` raises, the contents made so far are cleared through
        ``delete`` and the exception propagates.
        """
        mapped = LinkedList()
        for content in self:
            try:
                value = func(content)
            except Exception:
                mapped.clear(delete)
                raise
            mapped.push_back(value)
        return mapped

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"