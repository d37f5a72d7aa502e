"""Counting model of the producer/consumer bounded buffer."""

from __future__ import annotations

__all__ = ["BufferFull", "BufferEmpty", "BoundedBuffer"]

DEFAULT_CAPACITY = 3


class BufferFull(Exception):
    """Raised when producing into a full buffer."""


class BufferEmpty(Exception):
    """Raised when consuming from an empty buffer."""


class BoundedBuffer:
    """Buffer of numbered items with ``capacity`` slots."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._count = 0

    @property
    def full_slots(self) -> int:
        return self._count

    @property
    def empty_slots(self) -> int:
        return self.capacity - self._count

    def produce(self) -> int:
        """Add an item and return its number."""
        if self._count == self.capacity:
            raise BufferFull("buffer is full")
        self._count += 1
        return self._count

    def consume(self) -> int:
        """Remove the newest item and return its number."""
        if self._count == 0:
            raise BufferEmpty("buffer is empty")
        item = self._count
        self._count -= 1
        return item