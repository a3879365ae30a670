"""Mutex and counting semaphore with millisecond timeouts."""

from __future__ import annotations

import operator
import threading
from typing import Optional


def _seconds(timeout_ms: int) -> float:
    timeout_ms = operator.index(timeout_ms)
    if timeout_ms < 0:
        raise ValueError("timeout must not be negative")
    return timeout_ms / 1000.0


class Mutex:
    """Non-recursive mutual exclusion lock."""

    __slots__ = ("_lock",)

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def lock(self) -> None:
        self._lock.acquire()

    def try_lock(self, timeout_ms: int = 0) -> bool:
        """Acquire the lock, waiting at most ``timeout_ms`` milliseconds."""
        timeout = _seconds(timeout_ms)
        if timeout == 0:
            return self._lock.acquire(blocking=False)
        return self._lock.acquire(timeout=timeout)

    def unlock(self) -> None:
        """Release the lock; raise RuntimeError if it is not held."""
        self._lock.release()

    def locked(self) -> bool:
        return self._lock.locked()

    def __enter__(self) -> "Mutex":
        self.lock()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unlock()


class Semaphore:
    """Counting semaphore whose current value can be queried."""

    __slots__ = ("_value", "_condition")

    def __init__(self, value: int = 0) -> None:
        value = operator.index(value)
        if value < 0:
            raise ValueError("initial value must not be negative")
        self._value = value
        self._condition = threading.Condition(threading.Lock())

    def post(self) -> None:
        with self._condition:
            self._value += 1
            self._condition.notify()

    def try_wait(self, timeout_ms: int = 0) -> bool:
        """Decrement the counter, waiting at most ``timeout_ms`` milliseconds."""
        timeout: Optional[float] = _seconds(timeout_ms)
        with self._condition:
            if not self._condition.wait_for(lambda: self._value > 0, timeout):
                return False
            self._value -= 1
            return True

    def wait(self) -> None:
        with self._condition:
            self._condition.wait_for(lambda: self._value > 0)
            self._value -= 1

    def value(self) -> int:
        with self._condition:
            return self._value