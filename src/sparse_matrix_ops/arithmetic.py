import operator
from collections import defaultdict
from typing import Callable

from .sparse_matrix import SparseMatrix, Scalar
from .validation import validate_same_shape, validate_multiplicable
from .config import MatrixConfig
from .constants import MULTIPLY_METHODS, OPERATIONS
from .matrix_errors import InvalidMultiplyMethodError, InvalidOperationError


def _combine(a: SparseMatrix, b: SparseMatrix, fn: Callable[[Scalar, Scalar], Scalar]) -> SparseMatrix:
    """
    Combine two same-shape matrices key by key over the union of their supports.

    Absent keys read as 0. Keys whose combined value is 0 are left out of the result.
    """
    validate_same_shape(a, b)
    result = SparseMatrix(a.row_count, a.col_count)
    for key, v in a.data_store.items():
        result[key] = fn(v, b.data_store.get(key, 0))
    for key, v in b.data_store.items():
        # keys shared with a were already combined above
        if key not in a.data_store:
            result[key] = fn(0, v)
    return result


def add(a: SparseMatrix, b: SparseMatrix) -> SparseMatrix:
    """Element-wise sum of two matrices with equal dimensions."""
    return _combine(a, b, operator.add)


def subtract(a: SparseMatrix, b: SparseMatrix) -> SparseMatrix:
    """Element-wise difference a - b of two matrices with equal dimensions."""
    return _combine(a, b, operator.sub)


def _multiply_grouped(a: SparseMatrix, b: SparseMatrix) -> dict[tuple[int, int], Scalar]:
    # group the right operand by its row (the contraction index)
    b_rows = defaultdict(list)
    for (k, j), v2 in b.data_store.items():
        b_rows[k].append((j, v2))

    acc = defaultdict(int)
    for (i, k), v1 in a.data_store.items():
        row_group = b_rows.get(k)
        if row_group is None:
            continue
        for j, v2 in row_group:
            acc[(i, j)] += v1 * v2
    return acc


def _multiply_pairwise(a: SparseMatrix, b: SparseMatrix) -> dict[tuple[int, int], Scalar]:
    acc = defaultdict(int)
    for (i, k), v1 in a.data_store.items():
        for (k2, j), v2 in b.data_store.items():
            if k == k2:
                acc[(i, j)] += v1 * v2
    return acc


def multiply(a: SparseMatrix, b: SparseMatrix, method: str = 'grouped') -> SparseMatrix:
    """
    Sparse-sparse matrix product a @ b.

    Args:
        a: Left operand, shape (m, n)
        b: Right operand, shape (n, p)
        method: 'grouped' (default) visits only entries sharing a contraction index,
            'pairwise' scans every pair of non-zero entries. Results are identical.

    Returns:
        New SparseMatrix of shape (m, p) with zero sums pruned.

    Raises:
        DimensionMismatchError: If a.col_count != b.row_count
        InvalidMultiplyMethodError: If method is unknown
    """
    if method not in MULTIPLY_METHODS:
        raise InvalidMultiplyMethodError(method, MULTIPLY_METHODS)
    validate_multiplicable(a, b)

    if method == 'grouped':
        acc = _multiply_grouped(a, b)
    else:
        acc = _multiply_pairwise(a, b)

    result = SparseMatrix(a.row_count, b.col_count)
    for key, v in acc.items():
        # setting 0 is a no-op, so cancelled sums never enter the store
        result[key] = v
    return result


def apply_operation(operation: str, a: SparseMatrix, b: SparseMatrix, config: MatrixConfig = MatrixConfig()) -> SparseMatrix:
    """Run the named operation ('add', 'subtract' or 'multiply') on two matrices."""
    if operation == 'add':
        return add(a, b)
    elif operation == 'subtract':
        return subtract(a, b)
    elif operation == 'multiply':
        return multiply(a, b, method=config.multiply_method)
    raise InvalidOperationError(operation, OPERATIONS)
