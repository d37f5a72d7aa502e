import random

import pytest

from algokit.benchmark import (
    CaseTimings,
    first_pivot_quick_sort,
    format_table,
    main,
    time_cases,
    time_sort,
)

HEADER = "\tBest Case\tAverage Case\tWorst Case"


@pytest.mark.parametrize(
    "data",
    [[], [1], [2, 1], [3, 3, 1, 2], [5, 4, 3, 2, 1], [1, 2, 3, 4]],
)
def test_first_pivot_quick_sort(data):
    assert first_pivot_quick_sort(data) == sorted(data)


def test_first_pivot_quick_sort_random():
    rng = random.Random(7)
    data = [rng.randrange(1000) for _ in range(500)]
    assert first_pivot_quick_sort(data) == sorted(data)


def test_first_pivot_quick_sort_long_sorted_input():
    data = list(range(2000))
    assert first_pivot_quick_sort(data) == data


def test_time_sort_keeps_input():
    data = [3, 1, 2]
    elapsed = time_sort(data)
    assert elapsed >= 0
    assert data == [3, 1, 2]


def test_time_cases_reports_size():
    result = time_cases(50)
    assert result.size == 50
    assert min(result.best, result.average, result.worst) >= 0


def test_format_table_layout():
    table = format_table([CaseTimings(1000, 5, 12345678, 7)])
    lines = table.splitlines()
    assert lines[0] == HEADER
    assert lines[1] == "1000\t5\t\t12345678\t7\t"


def test_format_table_row_count():
    rows = [CaseTimings(size, 1, 2, 3) for size in (10, 20, 30)]
    assert len(format_table(rows).splitlines()) == 4


def test_main_prints_table(capsys):
    assert main(["20", "40"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == HEADER
    assert lines[1].startswith("20\t")
    assert lines[2].startswith("40\t")