"""Unbalanced binary search tree with successor and predecessor queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["BinarySearchTree"]


@dataclass(slots=True)
class _Node:
    key: Any
    left: _Node | None = None
    right: _Node | None = None


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


def _remove_leftmost(node: _Node) -> _Node | None:
    if node.left is None:
        return node.right
    node.left = _remove_leftmost(node.left)
    return node


def _delete(node: _Node | None, key: Any) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if key < node.key:
        node.left, removed = _delete(node.left, key)
        return node, removed
    if key > node.key:
        node.right, removed = _delete(node.right, key)
        return node, removed
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    node.key = _leftmost(node.right).key
    node.right = _remove_leftmost(node.right)
    return node, True


class BinarySearchTree:
    """Binary search tree; equal keys are placed in the right subtree."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inorder())

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def insert(self, key: Any) -> None:
        """Add ``key`` to the tree."""
        new = _Node(key)
        if self._root is None:
            self._root = new
        else:
            node = self._root
            while True:
                if key < node.key:
                    if node.left is None:
                        node.left = new
                        break
                    node = node.left
                else:
                    if node.right is None:
                        node.right = new
                        break
                    node = node.right
        self._size += 1

    def delete(self, key: Any) -> bool:
        """Remove one occurrence of ``key``; return whether anything was removed."""
        self._root, removed = _delete(self._root, key)
        if removed:
            self._size -= 1
        return removed

    def _find_with_path(self, key: Any) -> tuple[_Node, list[tuple[_Node, bool]]]:
        path: list[tuple[_Node, bool]] = []
        node = self._root
        while node is not None:
            if key == node.key:
                return node, path
            went_left = key < node.key
            path.append((node, went_left))
            node = node.left if went_left else node.right
        raise KeyError(key)

    def search(self, key: Any) -> bool:
        """True if ``key`` is stored in the tree."""
        try:
            self._find_with_path(key)
        except KeyError:
            return False
        return True

    def minimum(self) -> Any:
        """Smallest key; ValueError when the tree is empty."""
        if self._root is None:
            raise ValueError("minimum of an empty tree")
        return _leftmost(self._root).key

    def maximum(self) -> Any:
        """Largest key; ValueError when the tree is empty."""
        if self._root is None:
            raise ValueError("maximum of an empty tree")
        return _rightmost(self._root).key

    def successor(self, key: Any) -> Any | None:
        """Key following ``key`` in order, or None; KeyError if ``key`` is absent."""
        node, path = self._find_with_path(key)
        if node.right is not None:
            return _leftmost(node.right).key
        for ancestor, went_left in reversed(path):
            if went_left:
                return ancestor.key
        return None

    def predecessor(self, key: Any) -> Any | None:
        """Key preceding ``key`` in order, or None; KeyError if ``key`` is absent."""
        node, path = self._find_with_path(key)
        if node.left is not None:
            return _rightmost(node.left).key
        for ancestor, went_left in reversed(path):
            if not went_left:
                return ancestor.key
        return None

    def inorder(self) -> list[Any]:
        """All keys in ascending order."""
        keys: list[Any] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            keys.append(node.key)
            node = node.right
        return keys