"""Array puzzles: four-sum, permutations, maxima, zero runs and key counts."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from typing import Any

__all__ = [
    "four_sum",
    "next_permutation",
    "permutations",
    "maximum",
    "swap_contents",
    "longest_zero_run",
    "numbers_with_longest_zero_run",
    "count_keys",
]


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """All unique ascending quadruplets of ``nums`` that add up to ``target``."""
    data = sorted(nums)
    n = len(data)
    found: list[list[int]] = []
    if n < 4:
        return found
    i = 0
    while i < n:
        j = i + 1
        while j < n:
            left, right = j + 1, n - 1
            required = target - data[i] - data[j]
            while left < right:
                pair = data[left] + data[right]
                if required > pair:
                    left += 1
                elif required < pair:
                    right -= 1
                else:
                    quad = [data[i], data[j], data[left], data[right]]
                    found.append(quad)
                    while left < right and data[left] == quad[2]:
                        left += 1
                    while left < right and data[right] == quad[3]:
                        right -= 1
            while j + 1 < n and data[j + 1] == data[j]:
                j += 1
            j += 1
        while i + 1 < n and data[i + 1] == data[i]:
            i += 1
        i += 1
    return found


def next_permutation(nums: Iterable[Any]) -> list:
    """The lexicographically next arrangement; the last one wraps to the first."""
    data = list(nums)
    pivot = next(
        (i for i in range(len(data) - 2, -1, -1) if data[i] < data[i + 1]), None
    )
    if pivot is None:
        data.reverse()
        return data
    swap_with = next(i for i in range(len(data) - 1, pivot, -1) if data[pivot] < data[i])
    data[pivot], data[swap_with] = data[swap_with], data[pivot]
    data[pivot + 1 :] = reversed(data[pivot + 1 :])
    return data


def permutations(items: Iterable[Any]) -> Iterator[tuple]:
    """Yield every arrangement of ``items``, produced by successive swaps."""
    data = list(items)
    last = len(data) - 1

    def _permute(start: int) -> Iterator[tuple]:
        if start == last:
            yield tuple(data)
            return
        for i in range(start, len(data)):
            data[i], data[start] = data[start], data[i]
            yield from _permute(start + 1)
            data[i], data[start] = data[start], data[i]

    if data:
        yield from _permute(0)


def maximum(items: Iterable[Any]) -> Any:
    """Largest element; ValueError when there are none."""
    values = list(items)
    if not values:
        raise ValueError("maximum of an empty sequence")
    return max(values)


def swap_contents(first: MutableSequence, second: MutableSequence) -> None:
    """Exchange the contents of two equally long sequences in place."""
    if len(first) != len(second):
        raise ValueError("sequences must have the same length")
    first[:], second[:] = list(second), list(first)


def longest_zero_run(number: int) -> int:
    """Longest run of zero bits in the binary form of ``number`` (0 if not positive)."""
    if number <= 0:
        return 0
    return max(len(run) for run in bin(number)[2:].split("1"))


def numbers_with_longest_zero_run(numbers: Sequence[int]) -> list[int]:
    """Numbers sharing the longest zero run, in reverse input order."""
    if not numbers:
        return []
    runs = [longest_zero_run(number) for number in numbers]
    longest = max(runs)
    return [number for number, run in reversed(list(zip(numbers, runs))) if run == longest]


def count_keys(names: Iterable[str]) -> Counter:
    """Case-sensitive count of each name."""
    return Counter(names)