"""Fixed-capacity double-ended queue on a circular array."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["QueueOverflow", "QueueUnderflow", "BoundedDeque"]

DEFAULT_CAPACITY = 7


class QueueOverflow(OverflowError):
    """Raised when adding to a full deque."""


class QueueUnderflow(IndexError):
    """Raised when removing from an empty deque."""


class BoundedDeque:
    """Double-ended queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % self.capacity]

    def __repr__(self) -> str:
        return f"BoundedDeque({list(self)!r}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def _rear(self) -> int:
        return (self._front + self._size - 1) % self.capacity

    def push_front(self, item: Any) -> None:
        """Add ``item`` before the first element."""
        if self.is_full():
            raise QueueOverflow("deque is full")
        self._front = 0 if self.is_empty() else (self._front - 1) % self.capacity
        self._slots[self._front] = item
        self._size += 1

    def push_back(self, item: Any) -> None:
        """Add ``item`` after the last element."""
        if self.is_full():
            raise QueueOverflow("deque is full")
        if self.is_empty():
            self._front = 0
        self._size += 1
        self._slots[self._rear()] = item

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self.is_empty():
            raise QueueUnderflow("deque is empty")
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return item

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self.is_empty():
            raise QueueUnderflow("deque is empty")
        rear = self._rear()
        item = self._slots[rear]
        self._slots[rear] = None
        self._size -= 1
        return item