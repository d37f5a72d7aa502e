import pytest

from algokit.bst import BinarySearchTree

KEYS = [50, 30, 70, 20, 40, 60, 80, 35, 65]


@pytest.fixture
def tree():
    return BinarySearchTree(KEYS)


def test_inorder_is_sorted(tree):
    assert tree.inorder() == sorted(KEYS)
    assert list(tree) == sorted(KEYS)
    assert len(tree) == len(KEYS)


def test_minimum_and_maximum(tree):
    assert tree.minimum() == min(KEYS)
    assert tree.maximum() == max(KEYS)


def test_empty_tree_extremes_raise():
    empty = BinarySearchTree()
    with pytest.raises(ValueError):
        empty.minimum()
    with pytest.raises(ValueError):
        empty.maximum()


def test_search(tree):
    assert all(tree.search(key) for key in KEYS)
    assert tree.search(99) is False
    assert 35 in tree
    assert 36 not in tree


def test_successors_follow_sorted_order(tree):
    ordered = sorted(KEYS)
    for current, following in zip(ordered, ordered[1:]):
        assert tree.successor(current) == following
    assert tree.successor(ordered[-1]) is None


def test_predecessors_follow_sorted_order(tree):
    ordered = sorted(KEYS)
    for previous, current in zip(ordered, ordered[1:]):
        assert tree.predecessor(current) == previous
    assert tree.predecessor(ordered[0]) is None


def test_successor_of_missing_key_raises(tree):
    with pytest.raises(KeyError):
        tree.successor(99)
    with pytest.raises(KeyError):
        tree.predecessor(99)


@pytest.mark.parametrize("key", KEYS)
def test_delete_each_key(tree, key):
    assert tree.delete(key) is True
    expected = sorted(KEYS)
    expected.remove(key)
    assert tree.inorder() == expected
    assert len(tree) == len(expected)
    assert key not in tree


def test_delete_missing_key_is_noop(tree):
    assert tree.delete(99) is False
    assert tree.inorder() == sorted(KEYS)


def test_delete_everything(tree):
    for key in KEYS:
        tree.delete(key)
    assert tree.inorder() == []
    assert len(tree) == 0


def test_duplicates_are_kept():
    tree = BinarySearchTree([5, 5, 3, 5])
    assert tree.inorder() == [3, 5, 5, 5]
    tree.delete(5)
    assert tree.inorder() == [3, 5, 5]