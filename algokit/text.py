"""String checks: palindromes, reversal, bracket balance and checksums."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "is_palindrome",
    "reverse",
    "is_balanced",
    "sender_checksum",
    "receiver_checksum",
]

_OPENERS = "([{"
_CLOSERS = {")": "(", "]": "[", "}": "{"}


def is_palindrome(text: str) -> bool:
    """True if ``text`` reads the same backwards, ignoring letter case."""
    half = len(text) // 2
    return all(
        a.upper() == b.upper() for a, b in zip(text[:half], reversed(text))
    )


def reverse(text: str) -> str:
    """``text`` with its characters in reverse order."""
    return text[::-1]


def is_balanced(expression: str) -> bool:
    """True if every (, [ and { is closed by its partner in the right order."""
    stack: list[str] = []
    for char in expression:
        if char in _OPENERS:
            stack.append(char)
        elif char in _CLOSERS:
            if not stack or stack.pop() != _CLOSERS[char]:
                return False
    return not stack


def sender_checksum(values: Iterable[int]) -> int:
    """Bitwise complement of the sum of ``values``."""
    return ~sum(values)


def receiver_checksum(values: Iterable[int], checksum: int) -> int:
    """Complement of the received sum plus checksum; zero means no error."""
    return ~(sum(values) + checksum)