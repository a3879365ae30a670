"""Fixed-capacity double-ended ring queue."""

from __future__ import annotations

import operator
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class RingQueue(Generic[T]):
    """Double-ended queue stored in a circular buffer of fixed capacity."""

    __slots__ = ("_slots", "_capacity", "_head", "_tail", "_size")

    def __init__(self, capacity: int) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._slots: list[Optional[T]] = [None] * capacity
        self._head = 0
        self._tail = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for offset in range(self._size):
            yield self._slots[(self._head + offset) % self._capacity]

    def __getitem__(self, index: int) -> T:
        return self._slots[self._position(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._slots[self._position(index)] = value

    def __repr__(self) -> str:
        return f"RingQueue(capacity={self._capacity}, items={list(self)!r})"

    def capacity(self) -> int:
        return self._capacity

    def empty(self) -> bool:
        return self._size == 0

    def full(self) -> bool:
        return self._size == self._capacity

    def clear(self) -> None:
        self._slots = [None] * self._capacity
        self._head = 0
        self._tail = 0
        self._size = 0

    def front(self) -> T:
        self._ensure_not_empty()
        return self._slots[self._head]

    def back(self) -> T:
        self._ensure_not_empty()
        return self._slots[(self._tail - 1) % self._capacity]

    def push_back(self, element: T) -> None:
        self._ensure_room()
        self._slots[self._tail] = element
        self._tail = (self._tail + 1) % self._capacity
        self._size += 1

    def push_front(self, element: T) -> None:
        self._ensure_room()
        self._head = (self._head - 1) % self._capacity
        self._slots[self._head] = element
        self._size += 1

    def pop_back(self) -> T:
        """Remove and return the last element."""
        self._ensure_not_empty()
        self._tail = (self._tail - 1) % self._capacity
        element = self._slots[self._tail]
        self._slots[self._tail] = None
        self._size -= 1
        return element

    def pop_front(self) -> T:
        """Remove and return the first element."""
        self._ensure_not_empty()
        element = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self._capacity
        self._size -= 1
        return element

    def _position(self, index: int) -> int:
        index = operator.index(index)
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("queue index out of range")
        return (self._head + index) % self._capacity

    def _ensure_room(self) -> None:
        if self._size >= self._capacity:
            raise OverflowError("queue is full")

    def _ensure_not_empty(self) -> None:
        if not self._size:
            raise IndexError("queue is empty")