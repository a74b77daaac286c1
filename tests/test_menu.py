import io

from structkit.menu import run


def _session(script):
    out = io.StringIO()
    items = run(io.StringIO(script), out)
    return items, out.getvalue()


def test_create_and_display():
    items, output = _session("1 3 5 6 7\n2\n7\n")
    assert list(items) == [5, 6, 7]
    assert "List created" in output
    assert "5->6->7->End_of_list" in output


def test_create_zero_nodes():
    items, output = _session("1 0\n7\n")
    assert list(items) == []
    assert "List not created" in output


def test_display_empty():
    _, output = _session("2\n7\n")
    assert "List is empty" in output


def test_insert_options():
    items, _ = _session("1 2 10 20\n3 1 1\n3 3 30\n3 2 15 3\n7\n")
    assert list(items) == [1, 10, 15, 20, 30]


def test_insert_invalid_position():
    items, output = _session("1 1 4\n3 2 9 7\n7\n")
    assert list(items) == [4]
    assert "Invalid Position Entered" in output


def test_delete_options():
    items, output = _session("1 4 1 2 3 4\n4 1\n4 3\n7\n")
    assert list(items) == [2, 3]
    assert "First Node Deleted" in output
    assert "Last Node Deleted" in output


def test_delete_at_position_and_invalid():
    items, output = _session("1 3 1 2 3\n4 2 2\n4 2 9\n7\n")
    assert list(items) == [1, 3]
    assert "Invalid position" in output


def test_delete_from_empty():
    items, output = _session("4 1\n7\n")
    assert len(items) == 0
    assert "List is empty" in output


def test_search_found_and_missing():
    _, output = _session("1 3 5 6 7\n5 6\n5 42\n7\n")
    assert "Data Found at position : 1" in output
    assert "Data Not found" in output


def test_reverse():
    items, output = _session("1 3 5 6 7\n6\n7\n")
    assert list(items) == [7, 6, 5]
    assert "List Reversed" in output


def test_invalid_choice_and_non_numeric():
    items, output = _session("9\nabc\n7\n")
    assert output.count("Invalid Entry") == 2
    assert list(items) == []


def test_end_of_input_stops():
    items, _ = _session("1 2 8 9\n")
    assert list(items) == [8, 9]