import io

import pytest

from dictcipher.cli import main, run_menu
from dictcipher.customdict import CustomDict, ValueType


def _run(text, dictionary=None):
    dictionary = CustomDict() if dictionary is None else dictionary
    out = io.StringIO()
    run_menu(dictionary, io.StringIO(text), out)
    return dictionary, out.getvalue()


def test_add_and_print():
    dictionary, output = _run("1 apple i 1 2 3 e 6 8")
    assert dictionary.search_item("apple") == [1, 2, 3]
    assert "Key: apple, Values: 1 2 3 \n" in output
    assert output.endswith("Exiting...")


def test_add_existing_key_merges_values():
    dictionary, _ = _run("1 k i 1 e 1 k i 2 3 e 8")
    assert dictionary.search_item("k") == [1, 2, 3]
    assert len(dictionary) == 1


def test_char_values_have_no_terminator():
    dictionary, _ = _run("1 letters c abc xyz e 8")
    assert dictionary.search_item("letters") == ["a", "x"]


def test_double_values_parsed():
    dictionary, output = _run("1 d d 1.5 2.25 e 6 8")
    assert dictionary.search_item("d") == [1.5, 2.25]
    assert "Key: d, Values: 1.50 2.25 \n" in output


def test_delete_item():
    dictionary, _ = _run("1 a i 1 e 1 b i 2 e 2 a 8")
    assert "a" not in dictionary
    assert dictionary.search_item("b") == [2]


def test_set_value_replaces():
    dictionary, _ = _run("1 a i 1 2 e 3 a d 4.5 e 8")
    assert dictionary.search_item("a") == [4.5]
    assert next(iter(dictionary)).value_type is ValueType.DOUBLE


def test_search_found():
    _, output = _run("1 x i 7 8 e 4 x 8")
    assert "x\nValues: 7 8 \n" in output


def test_search_missing():
    _, output = _run("4 nothing 8")
    assert "Item not found.\n" in output


def test_sort_orders_keys():
    dictionary, output = _run("1 b i 1 e 1 a i 2 e 5 8")
    assert [item.key for item in dictionary] == ["a", "b"]
    assert "Dictionary sorted.\n" in output


def test_read_csv(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("i, nums, 1, 2, 3\n", encoding="utf-8")
    dictionary, output = _run(f"7 {path} 8")
    assert dictionary.search_item("nums") == [1, 2, 3]
    assert "CSV file read.\n" in output


def test_read_csv_missing_file(tmp_path):
    dictionary, output = _run(f"7 {tmp_path / 'absent.csv'} 8")
    assert "Failed to read file.\n" in output
    assert len(dictionary) == 0


def test_invalid_choice():
    _, output = _run("9 8")
    assert "Invalid choice. Please try again.\n" in output


def test_invalid_type_adds_nothing():
    dictionary, output = _run("1 k z 1 e 8")
    assert len(dictionary) == 0
    assert "Invalid type.\n" in output


def test_exit_stops_reading():
    dictionary, output = _run("8 1 a i 1 e")
    assert len(dictionary) == 0
    assert output.count("Enter your choice: ") == 1


def test_end_of_input_stops_loop():
    dictionary, output = _run("1 a i 1 2")
    assert len(dictionary) == 0
    assert "Exiting..." not in output


def test_existing_dictionary_is_used():
    existing = CustomDict()
    existing.add_item("pre", [5], ValueType.INT)
    dictionary, output = _run("6 8", existing)
    assert dictionary is existing
    assert "Key: pre, Values: 5 \n" in output


def test_main_uses_standard_streams(monkeypatch):
    out = io.StringIO()
    monkeypatch.setattr("sys.stdin", io.StringIO("1 a i 3 e 6 8"))
    monkeypatch.setattr("sys.stdout", out)
    assert main([]) == 0
    assert "Key: a, Values: 3 \n" in out.getvalue()


def test_main_rejects_arguments():
    with pytest.raises(SystemExit):
        main(["--unknown"])