import pytest

from structkit.linked_list import LinkedList


def test_insert_at_positions_example():
    items = LinkedList()
    items.insert_at(5, 1)
    items.insert_at(3, 2)
    items.insert_at(4, 1)
    assert list(items) == [4, 5, 3]


def test_insert_beginning_builds_reverse_order():
    items = LinkedList()
    for value in (2, 4, 3, 5):
        items.insert_beginning(value)
    assert list(items) == [5, 3, 4, 2]


def test_append_keeps_order_and_length():
    items = LinkedList()
    for value in (1, 2, 3):
        items.append(value)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_insert_at_middle_and_end():
    items = LinkedList([1, 3])
    items.insert_at(2, 2)
    items.insert_at(4, 4)
    assert list(items) == [1, 2, 3, 4]
    items.append(5)
    assert list(items)[-1] == 5


@pytest.mark.parametrize("position", [0, 4, -1])
def test_insert_at_invalid_position(position):
    items = LinkedList([1, 2])
    with pytest.raises(IndexError):
        items.insert_at(9, position)
    assert list(items) == [1, 2]


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_delete_at_each_position(position):
    values = [5, 3, 4, 2]
    items = LinkedList(values)
    removed = items.delete_at(position)
    assert removed == values[position - 1]
    expected = values[: position - 1] + values[position:]
    assert list(items) == expected
    assert len(items) == 3


def test_delete_at_last_then_append_uses_new_tail():
    items = LinkedList([1, 2, 3])
    items.delete_at(3)
    items.append(7)
    assert list(items) == [1, 2, 7]


@pytest.mark.parametrize("position", [0, 3])
def test_delete_at_invalid_position(position):
    items = LinkedList([1, 2])
    with pytest.raises(IndexError):
        items.delete_at(position)


def test_delete_first_and_last():
    items = LinkedList([1, 2, 3])
    assert items.delete_first() == 1
    assert items.delete_last() == 3
    assert list(items) == [2]
    assert items.delete_last() == 2
    assert len(items) == 0


def test_delete_from_empty_list():
    items = LinkedList()
    with pytest.raises(IndexError):
        items.delete_first()
    with pytest.raises(IndexError):
        items.delete_last()


def test_index_finds_first_occurrence():
    items = LinkedList([7, 8, 7])
    assert items.index(7) == 0
    assert items.index(8) == 1


def test_index_missing_value():
    with pytest.raises(ValueError):
        LinkedList([1, 2]).index(3)


@pytest.mark.parametrize(
    "method", ["reverse", "reverse_recursive", "reverse_with_stack"]
)
def test_reverse_example(method):
    items = LinkedList([2, 4, 6, 8])
    getattr(items, method)()
    assert list(items) == [8, 6, 4, 2]


@pytest.mark.parametrize(
    "method", ["reverse", "reverse_recursive", "reverse_with_stack"]
)
@pytest.mark.parametrize("values", [[], [1], [1, 2], list(range(10))])
def test_reverse_twice_restores_and_tail_is_correct(method, values):
    items = LinkedList(values)
    getattr(items, method)()
    assert list(items) == values[::-1]
    getattr(items, method)()
    assert list(items) == values
    items.append("end")
    assert list(items) == values + ["end"]


def test_reverse_with_stack_example():
    items = LinkedList()
    for value in (10, 20, 30, 40):
        items.insert_beginning(value)
    items.reverse_with_stack()
    assert list(items) == [10, 20, 30, 40]


def test_reversed_values_leaves_list_unchanged():
    items = LinkedList([2, 4, 6, 5])
    assert items.reversed_values() == [5, 6, 4, 2]
    assert list(items) == [2, 4, 6, 5]


def test_str_format():
    assert str(LinkedList([1, 2])) == "1->2->End_of_list"
    assert str(LinkedList()) == "End_of_list"