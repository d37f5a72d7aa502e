"""Time a first-element-pivot quicksort on best, average and worst inputs."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "CaseTimings",
    "first_pivot_quick_sort",
    "time_sort",
    "time_cases",
    "format_table",
    "main",
]

DEFAULT_SIZES = (1000, 10000, 100000)
_WORST_CASE_BASE = 111111
_RAND_MAX = 2**31 - 1
_WIDE_THRESHOLD = 10000000


@dataclass(frozen=True)
class CaseTimings:
    """Elapsed microseconds for one input size."""

    size: int
    best: int
    average: int
    worst: int


def _divide(data: list, start: int, end: int) -> int:
    pivot = data[start]
    boundary = start + 1
    for j in range(start + 1, end + 1):
        if data[j] < pivot:
            data[boundary], data[j] = data[j], data[boundary]
            boundary += 1
    data[boundary - 1], data[start] = data[start], data[boundary - 1]
    return boundary - 1


def first_pivot_quick_sort(items: Iterable) -> list:
    """Quicksort using the first element of each range as pivot."""
    data = list(items)
    pending = [(0, len(data) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        position = _divide(data, start, end)
        pending.append((position + 1, end))
        pending.append((start, position - 1))
    return data


def time_sort(items: Iterable) -> int:
    """Microseconds spent sorting a copy of ``items``."""
    data = list(items)
    began = time.perf_counter_ns()
    first_pivot_quick_sort(data)
    return (time.perf_counter_ns() - began) // 1000


def time_cases(size: int) -> CaseTimings:
    """Time ascending, random and descending inputs of the given size."""
    ascending = range(size)
    scattered = [random.randint(0, _RAND_MAX) for _ in range(size)]
    descending = range(_WORST_CASE_BASE, _WORST_CASE_BASE - size, -1)
    return CaseTimings(
        size=size,
        best=time_sort(ascending),
        average=time_sort(scattered),
        worst=time_sort(descending),
    )


def format_table(results: Iterable[CaseTimings]) -> str:
    """Tab-separated table of timings, one row per size."""
    lines = ["\tBest Case\tAverage Case\tWorst Case"]
    for result in results:
        cells = []
        for value in (result.best, result.average, result.worst):
            cells.append(f"\t{value}" if value >= _WIDE_THRESHOLD else f"\t{value}\t")
        lines.append(f"{result.size}{''.join(cells)}")
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Time quicksort on best, average and worst case inputs."
    )
    parser.add_argument(
        "sizes",
        nargs="*",
        type=int,
        default=list(DEFAULT_SIZES),
        help="input sizes to time",
    )
    args = parser.parse_args(argv)
    results = [time_cases(size) for size in args.sizes]
    print(format_table(results), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())