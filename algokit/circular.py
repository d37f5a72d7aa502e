"""Singly linked circular list with insertion at the front."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = ["CircularList"]


@dataclass(eq=False, slots=True)
class _Node:
    value: Any
    next: _Node = field(init=False)

    def __post_init__(self) -> None:
        self.next = self


class CircularList:
    """Circular list tracked by its last node; iteration starts after it."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._last: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_front(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        if self._last is None:
            return
        node = self._last.next
        while True:
            yield node.value
            if node is self._last:
                return
            node = node.next

    def __repr__(self) -> str:
        return f"CircularList(front-to-back={list(self)!r})"

    def insert_front(self, value: Any) -> None:
        """Insert ``value`` so that it becomes the first element."""
        node = _Node(value)
        if self._last is None:
            self._last = node
        else:
            node.next = self._last.next
            self._last.next = node
        self._size += 1