"""A singly linked list whose nodes carry arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node(Generic[T]):
    """One list element: its content and the node that follows it."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list with constant-time insertion at either end."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0
        for item in items or ():
            self.add_back(item)

    @property
    def head(self) -> Optional[Node[T]]:
        """The first node, or None when the list is empty."""
        return self._head

    def add_front(self, content: T) -> Node[T]:
        """Insert content at the front and return its new node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: T) -> Node[T]:
        """Append content at the back and return its new node."""
        node: Node[T] = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node[T]]:
        """The final node, or None when the list is empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def pop_front(self, delete: Deleter = None) -> T:
        """Remove the first node and return its content.

        When delete is given it is called with the content before it is
        returned. An empty list raises IndexError.
        """
        node = self._head
        if node is None:
            raise IndexError("pop from an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, calling delete on each content in order when given."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            node.next = None
            if delete is not None:
                delete(node.content)
            node = following

    def iterate(self, func: Callable[[T], Any]) -> None:
        """Call func on the content of every node, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[T], U], delete: Deleter = None) -> "LinkedList[U]":
        """A new list of func applied to every content.

        If func raises part way, delete is called on each content already
        produced for the new list and the exception propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result