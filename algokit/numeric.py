"""Modular powers, determinants, factorials, matrices and fractional knapsack."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence

__all__ = [
    "power_mod",
    "determinant",
    "factorial_digits",
    "matrix_multiply",
    "fractional_knapsack",
    "factorial",
    "sum_of_factorials",
    "count_up",
]


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """``base ** exponent % modulus`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    while exponent:
        if exponent % 2:
            result = result * base % modulus
        base = base * base % modulus
        exponent //= 2
    return result


def _cofactor_expansion(rows: list[list]) -> int:
    if len(rows) == 1:
        return rows[0][0]
    total = 0
    for column, value in enumerate(rows[0]):
        minor = [row[:column] + row[column + 1 :] for row in rows[1:]]
        term = value * _cofactor_expansion(minor)
        total += term if column % 2 == 0 else -term
    return total


def determinant(matrix: Iterable[Iterable[int]]) -> int:
    """Determinant by cofactor expansion along the first row."""
    rows = [list(row) for row in matrix]
    if not rows or any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square and non-empty")
    return _cofactor_expansion(rows)


def factorial(n: int) -> int:
    """Product 1 * 2 * ... * n; 1 when n is below 2."""
    return math.prod(range(1, n + 1))


def factorial_digits(n: int) -> str:
    """Decimal digits of n!, exact for any size."""
    return str(factorial(n))


def sum_of_factorials(n: int) -> int:
    """1! + 2! + ... + n!."""
    return sum(factorial(i) for i in range(1, n + 1))


def matrix_multiply(
    first: Iterable[Iterable[int]], second: Iterable[Iterable[int]]
) -> list[list[int]]:
    """Product of two matrices given as lists of rows."""
    left = [list(row) for row in first]
    right = [list(row) for row in second]
    if len({len(row) for row in right}) > 1:
        raise ValueError("second matrix has rows of different lengths")
    if any(len(row) != len(right) for row in left):
        raise ValueError(
            "columns of the first matrix must equal rows of the second"
        )
    columns = list(zip(*right))
    return [[sum(a * b for a, b in zip(row, column)) for column in columns] for row in left]


def fractional_knapsack(
    items: Iterable[tuple[float, float]], capacity: float
) -> float:
    """Best profit from (weight, profit) items when items may be split."""
    goods = list(items)
    if any(weight <= 0 for weight, _ in goods):
        raise ValueError("weights must be positive")
    ranked = sorted(goods, key=lambda item: item[1] / item[0], reverse=True)
    remaining = capacity
    total = 0.0
    for weight, profit in ranked:
        if weight > remaining:
            total += profit * remaining / weight
            break
        total += profit
        remaining -= weight
    return total


def count_up(start: int, stop: int = 100) -> Iterator[int]:
    """Integers from ``start`` up to and including ``stop``."""
    return iter(range(start, stop + 1))


def _square(rows: Sequence[Sequence[int]]) -> bool:
    return all(len(row) == len(rows) for row in rows)