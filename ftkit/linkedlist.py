"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(eq=False)
class Node(Generic[T]):
    """One link of a list: its content and the node that follows it."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list that can grow at either end."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    @property
    def head(self) -> Optional[Node[T]]:
        """The first node, or ``None`` when the list is empty."""
        return self._head

    def push_front(self, content: T) -> Node[T]:
        """Add a new node holding *content* at the start of the list and return it."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: T) -> Node[T]:
        """Add a new node holding *content* at the end of the list and return it."""
        node: Node[T] = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node[T]]:
        """Return the last node, or ``None`` when the list is empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def for_each(self, f: Callable[[T], Any]) -> None:
        """Call *f* on the content of every node, front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[T], U],
        delete: Optional[Callable[[U], Any]] = None,
    ) -> "LinkedList[U]":
        """Return a new list of ``f(content)`` for every node.

        If *f* raises, *delete* is called on each content already made,
        in order, and the exception propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every node, calling *delete* on each content front to back."""
        node = self._head
        self._head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following