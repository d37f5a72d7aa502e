from algokit.circular import CircularList


def test_empty_list():
    items = CircularList()
    assert list(items) == []
    assert len(items) == 0


def test_insert_front_puts_newest_first():
    items = CircularList()
    for value in [1, 2, 3]:
        items.insert_front(value)
    assert list(items) == [3, 2, 1]
    assert len(items) == 3


def test_single_element():
    items = CircularList()
    items.insert_front(42)
    assert list(items) == [42]


def test_constructor_inserts_each_value_at_front():
    values = list(range(10))
    items = CircularList(values)
    assert list(items) == values[::-1]


def test_iteration_is_repeatable():
    items = CircularList("abc")
    assert list(items) == list(items)
    assert len(list(items)) == len(items)