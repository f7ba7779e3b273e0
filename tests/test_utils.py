import os
import sys
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from sparse_matrix_ops import SparseMatrix


def make_matrix(rows: int, cols: int, entries: dict) -> SparseMatrix:
    m = SparseMatrix(rows, cols)
    for (i, j), v in entries.items():
        m[i, j] = v
    return m


def random_sparse(rows: int, cols: int, density: float = 0.3, seed: int = 0, integer: bool = True) -> SparseMatrix:
    rng = np.random.default_rng(seed)
    if integer:
        values = rng.integers(-5, 6, size=(rows, cols))
    else:
        values = np.round(rng.normal(size=(rows, cols)), 3)
    mask = rng.random((rows, cols)) < density
    return SparseMatrix.from_dense(values * mask)


def validate_matrix(result: SparseMatrix, expected: SparseMatrix, tol: float = 1e-8):
    failed = []
    if result.shape != expected.shape:
        failed.append(f"shape {result.shape} != {expected.shape}")
    for key in set(result.keys()) | set(expected.keys()):
        if not np.isclose(result[key], expected[key], rtol=tol, atol=tol):
            failed.append(f"{key}: {result[key]} != {expected[key]}")
    for key, v in result.items():
        if v == 0:
            failed.append(f"{key}: stored zero")

    if len(failed) > 0:
        raise AssertionError(f"matrix comparison failed: {failed}")
