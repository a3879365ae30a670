"""Fixed-capacity array with positional insertion and removal."""

from __future__ import annotations

import operator
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Array(Generic[T]):
    """Sequence that holds at most ``capacity`` elements."""

    __slots__ = ("_capacity", "_items")

    def __init__(self, capacity: int) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[operator.index(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[operator.index(index)] = value

    def __repr__(self) -> str:
        return f"Array(capacity={self._capacity}, items={self._items!r})"

    def capacity(self) -> int:
        """Return the maximum number of elements."""
        return self._capacity

    def empty(self) -> bool:
        return not self._items

    def full(self) -> bool:
        return len(self._items) >= self._capacity

    def clear(self) -> None:
        self._items.clear()

    def erase(self, index: int) -> None:
        """Remove the element at ``index``, shifting later elements down."""
        index = operator.index(index)
        size = len(self._items)
        if not -size <= index < size:
            raise IndexError("erase position out of range")
        self._items.pop(index)

    def insert(self, before: int, element: T) -> None:
        """Insert ``element`` so that it ends up at position ``before``."""
        before = operator.index(before)
        if not 0 <= before <= len(self._items):
            raise IndexError("insertion position out of range")
        self._ensure_room()
        self._items.insert(before, element)

    def push_back(self, element: T) -> None:
        self._ensure_room()
        self._items.append(element)

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from empty array")
        return self._items.pop()

    def back(self) -> T:
        """Return the last element without removing it."""
        if not self._items:
            raise IndexError("array is empty")
        return self._items[-1]

    def _ensure_room(self) -> None:
        if len(self._items) >= self._capacity:
            raise OverflowError("array is full")