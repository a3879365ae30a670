"""Circular byte buffer with bulk and zero-copy access."""

from __future__ import annotations

import operator


class ByteQueue:
    """FIFO of bytes backed by a fixed-size circular buffer."""

    __slots__ = ("_data", "_capacity", "_head", "_tail", "_size")

    def __init__(self, capacity: int) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data = bytearray(capacity)
        self._capacity = capacity
        self._head = 0
        self._tail = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"ByteQueue(capacity={self._capacity}, size={self._size})"

    def capacity(self) -> int:
        return self._capacity

    def empty(self) -> bool:
        return self._size == 0

    def full(self) -> bool:
        return self._size == self._capacity

    def clear(self) -> None:
        self._head = 0
        self._tail = 0
        self._size = 0

    def push(self, data) -> int:
        """Append as many bytes of ``data`` as fit; return how many were taken."""
        source = memoryview(data).cast("B")
        if self._size == self._capacity:
            return 0

        total = len(source)
        written = 0

        if self._tail >= self._head:
            count = min(total, self._capacity - self._tail)
            if count:
                self._data[self._tail:self._tail + count] = source[:count]
                self._tail += count
                if self._tail == self._capacity:
                    self._tail = 0
                written += count

        if self._tail < self._head:
            count = min(total - written, self._head - self._tail)
            if count:
                self._data[self._tail:self._tail + count] = \
                    source[written:written + count]
                self._tail += count
                written += count

        self._size += written
        return written

    def pop(self, length: int) -> bytes:
        """Remove and return up to ``length`` bytes from the front."""
        length = operator.index(length)
        if length < 0:
            raise ValueError("length must not be negative")
        if not self._size:
            return b""

        parts = []
        remaining = length

        if self._tail <= self._head:
            count = min(remaining, self._capacity - self._head)
            if count:
                parts.append(bytes(self._data[self._head:self._head + count]))
                self._head += count
                if self._head == self._capacity:
                    self._head = 0
                remaining -= count

        if self._tail > self._head:
            count = min(remaining, self._tail - self._head)
            if count:
                parts.append(bytes(self._data[self._head:self._head + count]))
                self._head += count
                remaining -= count

        result = b"".join(parts)
        self._size -= len(result)
        return result

    def abandon(self, size: int) -> None:
        """Drop ``size`` bytes from the front without reading them."""
        size = operator.index(size)
        if size < 0 or size > self._size:
            raise ValueError("cannot abandon more bytes than are queued")
        self._head += size
        if self._head >= self._capacity:
            self._head -= self._capacity
        self._size -= size

    def advance(self, size: int) -> None:
        """Commit ``size`` bytes written directly into the buffer."""
        size = operator.index(size)
        if size < 0 or self._size + size > self._capacity:
            raise ValueError("cannot advance beyond the free space")
        self._tail += size
        if self._tail >= self._capacity:
            self._tail -= self._capacity
        self._size += size

    def deferred_pop(self, offset: int = 0) -> memoryview:
        """Return a read-only view of the contiguous queued bytes after ``offset``."""
        offset = operator.index(offset)
        if offset < 0 or offset > self._size:
            raise ValueError("offset exceeds the queued data")
        head = self._wrap(self._head + offset)
        available = self._size - offset
        count = min(available, self._capacity - head) if available else 0
        return memoryview(self._data)[head:head + count].toreadonly()

    def deferred_push(self, offset: int = 0) -> memoryview:
        """Return a writable view of the contiguous free space after ``offset``."""
        offset = operator.index(offset)
        if offset < 0 or self._size + offset > self._capacity:
            raise ValueError("offset exceeds the free space")
        tail = self._wrap(self._tail + offset)
        free = self._capacity - self._size - offset
        count = min(free, self._capacity - tail) if free else 0
        return memoryview(self._data)[tail:tail + count]

    def _wrap(self, position: int) -> int:
        if position >= self._capacity:
            position -= self._capacity
        return position