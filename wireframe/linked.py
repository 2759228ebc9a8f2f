"""A singly linked list whose operations can hand removed contents to a callback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Deleter = Optional[Callable[[Any], None]]


@dataclass
class Node(Generic[T]):
    """One link of a list: its content and the link after it."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list of contents, starting at ``head``."""

    def __init__(self, contents: Optional[Any] = None) -> None:
        self.head: Optional[Node[T]] = None
        for content in contents or ():
            self.push_back(content)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: T) -> Node[T]:
        """Put ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: T) -> Node[T]:
        """Put ``content`` at the back and return its node."""
        node: Node[T] = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node[T]]:
        """The last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def pop_front(self, delete: Deleter = None) -> T:
        """Remove the first node and return its content.

        ``delete``, when given, is called with the content first.
        Raises IndexError on an empty list.
        """
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, front to back, passing each content to ``delete``."""
        while self.head is not None:
            self.pop_front(delete)

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` with each content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[T], U], delete: Deleter = None) -> "LinkedList[U]":
        """A new list of ``func(content)`` for each content.

        If ``func`` raises, the contents already made are passed to
        ``delete`` and the error propagates.
        """
        result: LinkedList[U] = LinkedList()
        tail: Optional[Node[U]] = None
        try:
            for content in self:
                node: Node[U] = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result