import pytest

from algokit.text import (
    is_balanced,
    is_palindrome,
    receiver_checksum,
    reverse,
    sender_checksum,
)

SOURCE_EXPRESSION = "[4-6]((8){(9-8)})"


def test_source_expression_is_balanced():
    assert is_balanced(SOURCE_EXPRESSION) is True


@pytest.mark.parametrize(
    "expression",
    [SOURCE_EXPRESSION[:-1], ")(", "(]", "{[}]", "((", "a)"],
)
def test_unbalanced_expressions(expression):
    assert is_balanced(expression) is False


def test_empty_and_plain_text_are_balanced():
    assert is_balanced("") is True
    assert is_balanced("no brackets here") is True


@pytest.mark.parametrize("word", ["Madam", "RaceCar", "a", "", "abBA"])
def test_palindromes(word):
    assert is_palindrome(word) is True


@pytest.mark.parametrize("word", ["hello", "ab", "Madame"])
def test_not_palindromes(word):
    assert is_palindrome(word) is False


@pytest.mark.parametrize("word", ["abc", "Hello", "x"])
def test_word_plus_reverse_is_palindrome(word):
    assert is_palindrome(word + reverse(word)) is True


def test_reverse_worked_example():
    assert reverse("abc") == "cba"


@pytest.mark.parametrize("word", ["", "a", "stressed", "hello world"])
def test_reverse_round_trip(word):
    assert reverse(reverse(word)) == word
    assert len(reverse(word)) == len(word)


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [10, 20, 30], [], [255, 0, 7]])
def test_checksum_round_trip_is_zero(values):
    assert receiver_checksum(values, sender_checksum(values)) == 0


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [10, 20, 30]])
def test_sender_checksum_is_ones_complement(values):
    assert sender_checksum(values) + sum(values) == -1


def test_corrupted_data_detected():
    sent = [5, 9, 13]
    checksum = sender_checksum(sent)
    received = [5, 9, 14]
    assert receiver_checksum(received, checksum) != 0
    assert receiver_checksum(sent, checksum) == 0