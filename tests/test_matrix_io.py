import os
import sys
import pandas as pd
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from sparse_matrix_ops import SparseMatrix, FormatError, load, loads, save, dumps, format_lines, to_dataframe, from_dataframe
from test_utils import make_matrix, random_sparse


def test_load_basic(tmp_path):
    fp = tmp_path / "a.txt"
    fp.write_text("Rows=3\nCols=4\n(0,1,5)\n(2,3,-2.5)\n")
    m = load(str(fp))
    assert m.shape == (3, 4)
    assert m == make_matrix(3, 4, {(0, 1): 5, (2, 3): -2.5})
    assert type(m[0, 1]) is int
    assert type(m[2, 3]) is float


def test_blank_lines_and_whitespace_ignored():
    text = "\n  Rows = 2\n\nCols=2 \n\n( 0 , 1 , 7 )\n   \n(1,0,3)\n\n"
    m = loads(text)
    assert m == make_matrix(2, 2, {(0, 1): 7, (1, 0): 3})


def test_header_only_is_all_zero_matrix():
    m = loads("Rows=5\nCols=6")
    assert m.shape == (5, 6)
    assert len(m) == 0


def test_zero_entries_are_dropped():
    m = loads("Rows=2\nCols=2\n(0,0,0)\n(1,1,0.0)\n(0,1,4)")
    assert list(m.keys()) == [(0, 1)]


def test_duplicate_coordinates_last_wins():
    m = loads("Rows=2\nCols=2\n(0,0,1)\n(0,0,9)")
    assert m[0, 0] == 9
    m = loads("Rows=2\nCols=2\n(0,0,1)\n(0,0,0)")
    assert (0, 0) not in m


@pytest.mark.parametrize("text, line_number", [
    ("Rows=2\nCols=2\n(0,1)", 3),
    ("Rows=2\nCols=2\n(0,1,2,3)", 3),
    ("Rows=2\nCols=2\n(a,1,2)", 3),
    ("Rows=2\nCols=2\n(0.5,1,2)", 3),
    ("Rows=2\nCols=2\n(0,1,x)", 3),
    ("Rows=2\nCols=2\n(0,1,nan)", 3),
    ("Rows=2\nCols=2\n\n(2,0,1)", 4),
    ("Rows=2\nCols=2\n(0,-1,1)", 3),
    ("Rows=two\nCols=2", 1),
    ("Rows2\nCols=2", 1),
    ("Cols=2\nRows=2", 1),
    ("Rows=2\nColumns=2", 2),
    ("Rows=-1\nCols=2", 1),
])
def test_malformed_content_raises_format_error(text, line_number):
    with pytest.raises(FormatError) as exc_info:
        loads(text, source="bad.txt")
    assert exc_info.value.line_number == line_number
    assert exc_info.value.source == "bad.txt"
    assert "bad.txt" in str(exc_info.value)


def test_missing_headers():
    with pytest.raises(FormatError):
        loads("")
    with pytest.raises(FormatError):
        loads("Rows=2\n\n")


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        loads("Rows=2\nCols=2\n(0,1)")


def test_load_missing_file_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        load(str(tmp_path / "does_not_exist.txt"))


def test_load_non_utf8_raises_format_error(tmp_path):
    fp = tmp_path / "binary.txt"
    fp.write_bytes(b"Rows=1\nCols=1\n(0,0,\xff)\n")
    with pytest.raises(FormatError):
        load(str(fp))


def test_save_format_follows_store_order(tmp_path):
    m = SparseMatrix(3, 3)
    m[2, 0] = 4
    m[0, 1] = -1.5
    assert format_lines(m) == ["Rows=3", "Cols=3", "(2,0,4)", "(0,1,-1.5)"]

    fp = tmp_path / "out.txt"
    save(m, str(fp))
    assert fp.read_text() == "Rows=3\nCols=3\n(2,0,4)\n(0,1,-1.5)\n"


def test_save_empty_matrix():
    assert dumps(SparseMatrix()) == "Rows=0\nCols=0\n"


def test_save_to_missing_directory_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        save(SparseMatrix(1, 1), str(tmp_path / "missing" / "out.txt"))


@pytest.mark.parametrize("integer", [True, False])
def test_round_trip(tmp_path, integer):
    m = random_sparse(7, 5, density=0.4, seed=3, integer=integer)
    m[6, 4] = 1e-20 if not integer else 11
    fp = tmp_path / "m.txt"
    save(m, str(fp))
    loaded = load(str(fp))
    assert loaded == m
    assert loaded.shape == m.shape


def test_dataframe_round_trip():
    m = make_matrix(3, 3, {(0, 0): 1, (2, 1): -4.5})
    df = to_dataframe(m)
    assert list(df.columns) == ["row", "col", "value"]
    assert len(df) == 2
    assert from_dataframe(df, m.shape) == m


def test_empty_dataframe():
    df = to_dataframe(SparseMatrix(2, 2))
    assert len(df) == 0
    assert from_dataframe(df, (2, 2)) == SparseMatrix(2, 2)


def test_from_dataframe_drops_zeros_and_checks_bounds():
    df = pd.DataFrame({"row": [0, 1, 0], "col": [0, 1, 0], "value": [3, 0, 5]})
    assert from_dataframe(df, (2, 2)) == make_matrix(2, 2, {(0, 0): 5})

    with pytest.raises(FormatError):
        from_dataframe(pd.DataFrame({"row": [2], "col": [0], "value": [1]}), (2, 2))
    with pytest.raises(FormatError):
        from_dataframe(pd.DataFrame({"row": [0], "value": [1]}), (2, 2))
