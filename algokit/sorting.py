"""Comparison and distribution sorts, sorted-list merging and inversion counting.

Every sort accepts any iterable and returns a new ascending list; the input
is left untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "cocktail_sort",
    "quick_sort",
    "insertion_sort",
    "selection_sort",
    "heap_sort",
    "merge_sort",
    "radix_sort",
    "merge_sorted",
    "count_inversions",
]


def bubble_sort(items: Iterable[Any]) -> list:
    """Bubble sort that stops as soon as a pass makes no swap."""
    data = list(items)
    n = len(data)
    for done in range(n):
        swapped = False
        for j in range(n - done - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
                swapped = True
        if not swapped:
            break
    return data


def cocktail_sort(items: Iterable[Any]) -> list:
    """Cocktail shaker sort: alternating forward and backward bubble passes."""
    data = list(items)
    start, end = 0, len(data) - 1
    swapped = True
    while swapped:
        swapped = False
        for i in range(start, end):
            if data[i] > data[i + 1]:
                data[i], data[i + 1] = data[i + 1], data[i]
                swapped = True
        if not swapped:
            break
        swapped = False
        end -= 1
        for i in range(end - 1, start - 1, -1):
            if data[i] > data[i + 1]:
                data[i], data[i + 1] = data[i + 1], data[i]
                swapped = True
        start += 1
    return data


def _partition(data: list, low: int, high: int) -> int:
    pivot = data[high]
    boundary = low - 1
    for j in range(low, high):
        if data[j] < pivot:
            boundary += 1
            data[boundary], data[j] = data[j], data[boundary]
    data[boundary + 1], data[high] = data[high], data[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[Any]) -> list:
    """Quicksort with the last element of each range as pivot."""
    data = list(items)
    pending = [(0, len(data) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_at = _partition(data, low, high)
        pending.append((pivot_at + 1, high))
        pending.append((low, pivot_at - 1))
    return data


def insertion_sort(items: Iterable[Any]) -> list:
    """Insertion sort; equal elements keep their order."""
    data = list(items)
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and data[j] > key:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key
    return data


def selection_sort(items: Iterable[Any]) -> list:
    """Selection sort: repeatedly move the smallest remaining element forward."""
    data = list(items)
    n = len(data)
    for i in range(n):
        smallest = min(range(i, n), key=data.__getitem__)
        data[i], data[smallest] = data[smallest], data[i]
    return data


def _sift_down(data: list, size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and data[left] > data[largest]:
            largest = left
        if right < size and data[right] > data[largest]:
            largest = right
        if largest == root:
            return
        data[root], data[largest] = data[largest], data[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list:
    """Heap sort using an in-place max-heap."""
    data = list(items)
    n = len(data)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(data, n, root)
    for end in range(n - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, end, 0)
    return data


def merge_sort(items: Iterable[Any]) -> list:
    """Top-down stable merge sort."""
    data = list(items)
    if len(data) <= 1:
        return data
    middle = (len(data) - 1) // 2 + 1
    left = merge_sort(data[:middle])
    right = merge_sort(data[middle:])
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def radix_sort(items: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers.

    Raises ValueError for negative numbers.
    """
    data = list(items)
    if not data:
        return data
    if any(value < 0 for value in data):
        raise ValueError("radix sort handles only non-negative integers")
    largest = max(data)
    exponent = 1
    while largest // exponent > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in data:
            buckets[(value // exponent) % 10].append(value)
        data = [value for bucket in buckets for value in bucket]
        exponent *= 10
    return data


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list:
    """Merge two ascending sequences into one ascending list.

    On ties the element from ``second`` is taken first.
    """
    left, right = list(first), list(second)
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(right[j:])
    merged.extend(left[i:])
    return merged


def _sort_and_count(data: list) -> tuple[list, int]:
    if len(data) <= 1:
        return data, 0
    middle = (len(data) - 1) // 2 + 1
    left, left_count = _sort_and_count(data[:middle])
    right, right_count = _sort_and_count(data[middle:])
    merged = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            count += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(items: Iterable[Any]) -> int:
    """Number of pairs (i, j) with i < j and items[i] > items[j]."""
    _, count = _sort_and_count(list(items))
    return count