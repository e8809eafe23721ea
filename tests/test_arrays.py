import io

import pytest

from dsdrills.arrays import delete_at, format_indexed, insert_at, main, override


@pytest.mark.parametrize("position", [0, 1, 2, 3])
def test_insert_at_places_value_and_keeps_order(position):
    values = [1, 2, 3]
    result = insert_at(values, position, 99)
    assert len(result) == len(values) + 1
    assert result[position] == 99
    assert result[:position] + result[position + 1:] == values


def test_insert_at_does_not_change_input():
    values = [1, 2, 3, 4, 5]
    insert_at(values, 2, 7)
    assert values == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("position", [-1, 4])
def test_insert_at_rejects_out_of_range(position):
    with pytest.raises(IndexError):
        insert_at([1, 2, 3], position, 9)


def test_insert_into_empty():
    assert insert_at([], 0, 5) == [5]


@pytest.mark.parametrize("position", [1, 2, 3, 4, 5])
def test_delete_at_is_one_based(position):
    values = [10, 20, 30, 40, 50]
    result = delete_at(values, position)
    assert len(result) == 4
    assert values[position - 1] not in result
    assert result == values[: position - 1] + values[position:]


@pytest.mark.parametrize("position", [0, 6, -2])
def test_delete_at_rejects_out_of_range(position):
    with pytest.raises(IndexError):
        delete_at([1, 2, 3, 4, 5], position)


def test_delete_then_insert_round_trip():
    values = [4, 8, 15, 16, 23]
    removed = delete_at(values, 3)
    assert insert_at(removed, 2, values[2]) == values


def test_override_first_elements():
    values = [1, 2, 3, 4, 5]
    assert override(values, {0: 10, 1: 20}) == [10, 20, 3, 4, 5]
    assert values == [1, 2, 3, 4, 5]


def test_override_accepts_pairs():
    assert override([1, 2, 3, 4, 5], [(2, 5)]) == [1, 2, 5, 4, 5]


@pytest.mark.parametrize("index", [-1, 5])
def test_override_rejects_out_of_range(index):
    with pytest.raises(IndexError):
        override([1, 2, 3, 4, 5], {index: 0})


def test_format_indexed():
    assert format_indexed([1, 2, 3]) == "a[0]=1\na[1]=2\na[2]=3"


def test_format_indexed_empty():
    assert format_indexed([]) == ""


def test_main_delete(capsys):
    assert main(["delete", "--position", "2", "1", "2", "3"]) == 0
    out = capsys.readouterr().out
    after = out.split("The array after deletion is: \n", 1)[1]
    assert after.strip() == "a[0]=1\na[1]=3"


def test_main_insert(capsys):
    assert main(["insert", "--position", "1", "--value", "7", "1", "2"]) == 0
    out = capsys.readouterr().out
    after = out.split("The array after inserting the element is: \n", 1)[1]
    assert after.strip() == "a[0]=1\na[1]=7\na[2]=2"


def test_main_override(capsys):
    assert main(["override", "--set", "0=10", "--set", "1=20", "1", "2", "3"]) == 0
    out = capsys.readouterr().out
    after = out.split("The array after overriding is: \n", 1)[1]
    assert after.strip() == "a[0]=10\na[1]=20\na[2]=3"


def test_main_traverse_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n4 5 6\n"))
    assert main(["traverse"]) == 0
    out = capsys.readouterr().out
    assert "The array is: \na[0]=4\na[1]=5\na[2]=6" in out


def test_main_short_stdin_fails(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n4\n"))
    assert main(["traverse"]) == 1
    assert "input ended" in capsys.readouterr().err


def test_main_bad_position_fails(capsys):
    assert main(["delete", "--position", "9", "1", "2"]) == 1
    assert "position 9" in capsys.readouterr().err