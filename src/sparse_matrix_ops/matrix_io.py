"""
Text serialization of sparse matrices.

File layout::

    Rows=<int>
    Cols=<int>
    (<row>,<col>,<value>)
    ...

Blank lines are ignored on read. Rows/Cols must come first, in that order.
"""

import math
import pandas as pd
from typing import Iterable, Optional

from .sparse_matrix import SparseMatrix, Scalar
from .constants import ROWS_KEY, COLS_KEY, HEADER_SEPARATOR, ENTRY_SEPARATOR, MatrixColumn
from .matrix_errors import FormatError


def _parse_header(line: str, expected_key: str, line_number: int, source: Optional[str]) -> int:
    if HEADER_SEPARATOR not in line:
        raise FormatError(f"expected '{expected_key}{HEADER_SEPARATOR}<integer>'", line_number, line, source)
    key, value = line.split(HEADER_SEPARATOR, 1)
    if key.strip().lower() != expected_key.lower():
        raise FormatError(f"expected '{expected_key}' header", line_number, line, source)
    try:
        count = int(value.strip())
    except ValueError:
        raise FormatError(f"'{expected_key}' value is not an integer", line_number, line, source) from None
    if count < 0:
        raise FormatError(f"'{expected_key}' cannot be negative", line_number, line, source)
    return count


def _parse_value(text: str) -> Scalar:
    """Integer literals stay int, anything else numeric becomes float."""
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"non-finite value {text}")
    return value


def _parse_entry(line: str, line_number: int, source: Optional[str]) -> tuple[int, int, Scalar]:
    fields = line.replace('(', '').replace(')', '').split(ENTRY_SEPARATOR)
    if len(fields) != 3:
        raise FormatError(f"expected 3 comma separated fields, got {len(fields)}", line_number, line, source)
    try:
        row = int(fields[0].strip())
        col = int(fields[1].strip())
    except ValueError:
        raise FormatError("row and column must be integers", line_number, line, source) from None
    try:
        value = _parse_value(fields[2])
    except ValueError:
        raise FormatError("value is not a finite number", line_number, line, source) from None
    return row, col, value


def parse_lines(lines: Iterable[str], source: Optional[str] = None) -> SparseMatrix:
    """
    Build a SparseMatrix from the lines of a matrix file.

    Args:
        lines: Raw text lines, blank lines are skipped
        source: Name used in error messages (typically the file path)

    Returns:
        The parsed matrix. Zero-valued entries are dropped and a repeated
        coordinate keeps its last value.

    Raises:
        FormatError: On a malformed header or entry line, or an entry outside
            the declared dimensions. No partial matrix is returned.
    """
    numbered = [(n, line.strip()) for n, line in enumerate(lines, start=1) if line.strip()]
    if len(numbered) < 2:
        raise FormatError(f"missing '{ROWS_KEY}' and '{COLS_KEY}' header lines", source=source)

    rows = _parse_header(numbered[0][1], ROWS_KEY, numbered[0][0], source)
    cols = _parse_header(numbered[1][1], COLS_KEY, numbered[1][0], source)

    matrix = SparseMatrix(rows, cols)
    for line_number, line in numbered[2:]:
        row, col, value = _parse_entry(line, line_number, source)
        if not (0 <= row < rows and 0 <= col < cols):
            raise FormatError(f"coordinate ({row},{col}) outside {rows}x{cols} matrix", line_number, line, source)
        # a zero overwrites (removes) any earlier value at the same coordinate
        matrix[row, col] = value
    return matrix


def loads(text: str, source: Optional[str] = None) -> SparseMatrix:
    return parse_lines(text.splitlines(), source=source)


def load(path: str) -> SparseMatrix:
    """
    Load a matrix file.

    Raises:
        OSError: If the file cannot be opened or read
        FormatError: If the content is not a valid matrix file
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise FormatError(f"file is not valid UTF-8 text ({e.reason})", source=str(path)) from e
    return loads(text, source=str(path))


def format_lines(matrix: SparseMatrix) -> list[str]:
    """Header lines followed by one entry line per stored value, in store order."""
    lines = [f"{ROWS_KEY}{HEADER_SEPARATOR}{matrix.row_count}", f"{COLS_KEY}{HEADER_SEPARATOR}{matrix.col_count}"]
    lines.extend(f"({row},{col},{value!r})" for row, col, value in matrix.entries())
    return lines


def dumps(matrix: SparseMatrix) -> str:
    return "\n".join(format_lines(matrix)) + "\n"


def save(matrix: SparseMatrix, path: str) -> None:
    """
    Write a matrix file. Write failures propagate as OSError; a partially
    written file is left in place.
    """
    with open(path, 'w', encoding='utf-8') as f:
        f.write(dumps(matrix))


def to_dataframe(matrix: SparseMatrix) -> pd.DataFrame:
    """One row per stored entry with columns row, col, value."""
    cols = [MatrixColumn.ROW, MatrixColumn.COL, MatrixColumn.VALUE]
    return pd.DataFrame([list(entry) for entry in matrix.entries()], columns=cols)


def from_dataframe(df: pd.DataFrame, shape: tuple[int, int]) -> SparseMatrix:
    """
    Build a SparseMatrix from a DataFrame with row, col, value columns.

    Zero values are dropped and a repeated coordinate keeps its last value.
    """
    for col in [MatrixColumn.ROW, MatrixColumn.COL, MatrixColumn.VALUE]:
        if col not in df.columns:
            raise FormatError(f"column \"{col}\" not found in DataFrame", source="DataFrame")

    rows, cols = shape
    matrix = SparseMatrix(int(rows), int(cols))
    for row, col, value in df[[MatrixColumn.ROW, MatrixColumn.COL, MatrixColumn.VALUE]].itertuples(index=False, name=None):
        row, col = int(row), int(col)
        if not (0 <= row < rows and 0 <= col < cols):
            raise FormatError(f"coordinate ({row},{col}) outside {rows}x{cols} matrix", source="DataFrame")
        matrix[row, col] = value
    return matrix
