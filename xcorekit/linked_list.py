"""Singly linked list with node handles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class ListNode(Generic[T]):
    """A list element and the link to its successor."""

    data: T
    next: Optional["ListNode[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list whose nodes can be addressed directly."""

    __slots__ = ("_head", "_size")

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[ListNode[T]] = None
        self._size = 0
        if items is not None:
            last: Optional[ListNode[T]] = None
            for item in items:
                node = ListNode(item)
                if last is None:
                    self._head = node
                else:
                    last.next = node
                last = node
                self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.data

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def head(self) -> Optional[ListNode[T]]:
        """Return the first node, or None when the list is empty."""
        return self._head

    def empty(self) -> bool:
        return self._head is None

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def push_back(self, element: T) -> ListNode[T]:
        node = ListNode(element)
        if self._head is None:
            self._head = node
        else:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = node
        self._size += 1
        return node

    def push_front(self, element: T) -> ListNode[T]:
        node = ListNode(element, self._head)
        self._head = node
        self._size += 1
        return node

    def insert(self, previous: Optional[ListNode[T]], element: T) -> ListNode[T]:
        """Insert after ``previous``, or at the front when it is None."""
        if previous is None:
            return self.push_front(element)
        node = ListNode(element, previous.next)
        previous.next = node
        self._size += 1
        return node

    def erase(self, element: T) -> int:
        """Remove every element equal to ``element``; return how many went."""
        return self.erase_if(lambda data: data == element)

    def erase_if(self, predicate: Callable[[T], bool]) -> int:
        """Remove every element for which ``predicate`` holds."""
        removed = 0
        previous: Optional[ListNode[T]] = None
        node = self._head
        while node is not None:
            following = node.next
            if predicate(node.data):
                self._unlink(previous, node)
                removed += 1
            else:
                previous = node
            node = following
        return removed

    def erase_node(self, node: ListNode[T]) -> Optional[ListNode[T]]:
        """Remove ``node`` and return the node that followed it."""
        previous: Optional[ListNode[T]] = None
        for current in self._nodes():
            if current is node:
                following = node.next
                self._unlink(previous, node)
                return following
            previous = current
        raise ValueError("node does not belong to this list")

    def find(self, element: T) -> Optional[ListNode[T]]:
        return self.find_if(lambda data: data == element)

    def find_if(self, predicate: Callable[[T], bool]) -> Optional[ListNode[T]]:
        """Return the first node whose data satisfies ``predicate``."""
        for node in self._nodes():
            if predicate(node.data):
                return node
        return None

    def _nodes(self) -> Iterator[ListNode[T]]:
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def _unlink(self, previous: Optional[ListNode[T]], node: ListNode[T]) -> None:
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        node.next = None
        self._size -= 1