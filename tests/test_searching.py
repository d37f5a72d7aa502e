import pytest

from algokit.searching import binary_search, count_at_most

SAMPLE = [12, 11, 13, 5, 6, 7]


def test_binary_search_finds_every_element():
    items = sorted(SAMPLE)
    for value in items:
        index = binary_search(items, value)
        assert items[index] == value


def test_binary_search_missing_returns_none():
    items = sorted(SAMPLE)
    assert binary_search(items, 8) is None
    assert binary_search(items, 100) is None
    assert binary_search(items, -1) is None


def test_binary_search_empty_sequence():
    assert binary_search([], 5) is None


def test_binary_search_with_duplicates_hits_target():
    items = [1, 3, 3, 3, 3, 9]
    index = binary_search(items, 3)
    assert items[index] == 3


def test_binary_search_works_on_strings():
    words = sorted(["pear", "apple", "fig", "kiwi"])
    assert words[binary_search(words, "kiwi")] == "kiwi"


def test_count_at_most_of_maximum_is_length():
    assert count_at_most(SAMPLE, max(SAMPLE)) == len(SAMPLE)


def test_count_at_most_below_minimum_is_zero():
    assert count_at_most(SAMPLE, min(SAMPLE) - 1) == 0


def test_count_at_most_counts_equal_values():
    assert count_at_most([5, 5, 5], 5) == 3


@pytest.mark.parametrize("target", range(0, 15))
def test_count_at_most_is_monotonic(target):
    assert count_at_most(SAMPLE, target) <= count_at_most(SAMPLE, target + 1)


def test_count_at_most_empty():
    assert count_at_most([], 10) == 0