import numpy as np
import scipy.sparse as sp
from dataclasses import dataclass, field
from typing import Iterator, Union

Scalar = Union[int, float]


def _as_key(key) -> tuple[int, int]:
    if isinstance(key, tuple) and len(key) == 2:
        return key
    raise KeyError("SparseMatrix indices must be a tuple of length 2")


def _to_python_scalar(value) -> Scalar:
    # numpy scalars are unwrapped so that saved files read "2.5" and not "np.float64(2.5)"
    if isinstance(value, np.generic):
        return value.item()
    return value


@dataclass
class SparseMatrix:
    """
    Coordinate-keyed sparse matrix.

    Only the non-zero support is stored: data_store maps (row, col) to a non-zero value.
    Writing a zero removes the key, so len(matrix) is always the number of non-zeros.
    """

    row_count: int = 0
    col_count: int = 0
    data_store: dict[tuple[int, int], Scalar] = field(default_factory=dict)

    @property
    def shape(self) -> tuple[int, int]:
        return self.row_count, self.col_count

    @property
    def nnz(self) -> int:
        return len(self.data_store)

    def add_at(self, i: int, j: int, v: Scalar) -> None:
        """Add a value to the element at position (i, j)."""
        self[i, j] = self[i, j] + v

    def get(self, i: int, j: int) -> Scalar:
        """Get the value at position (i, j)."""
        return self[i, j]

    def set(self, i: int, j: int, v: Scalar) -> None:
        """Set the value at position (i, j). Setting 0 removes the entry."""
        self[i, j] = v

    def __getitem__(self, key) -> Scalar:
        """Returns the value at position (i, j).

        Args:
            key: A tuple (i, j)

        Returns:
            The value at position (i, j), or 0 if not stored.
        """
        return self.data_store.get(_as_key(key), 0)

    def __setitem__(self, key, value: Scalar) -> None:
        """Sets the value at position (i, j).

        Args:
            key: A tuple (i, j)
            value: The value to set. A zero value removes the entry.
        """
        key = _as_key(key)
        if value == 0:
            self.data_store.pop(key, None)
        else:
            self.data_store[key] = _to_python_scalar(value)

    def __delitem__(self, key) -> None:
        self.data_store.pop(_as_key(key), None)

    def __contains__(self, key) -> bool:
        if isinstance(key, tuple) and len(key) == 2:
            return key in self.data_store
        return False

    def __len__(self) -> int:
        return len(self.data_store)

    def __iter__(self):
        """Iterate over the (row, col) positions holding non-zero values."""
        return iter(self.data_store.keys())

    def keys(self):
        return self.data_store.keys()

    def values(self):
        return self.data_store.values()

    def items(self) -> list[tuple[tuple[int, int], Scalar]]:
        """Returns a list of ((row, col), value) pairs, mimicking dict.items()."""
        return list(self.data_store.items())

    def entries(self) -> Iterator[tuple[int, int, Scalar]]:
        """Lazily yield (row, col, value) triples in store order.

        Each call returns a fresh generator, so the sequence can be restarted.
        """
        return ((i, j, v) for (i, j), v in self.data_store.items())

    def is_equal(self, other: 'SparseMatrix', tol: float = 1e-8) -> bool:
        """Compare shape and support exactly and values within tolerance."""
        if self.shape != other.shape:
            return False
        if self.data_store.keys() != other.data_store.keys():
            return False
        if len(self.data_store) == 0:
            return True
        keys = list(self.data_store.keys())
        a = np.array([self.data_store[k] for k in keys], dtype=float)
        b = np.array([other.data_store[k] for k in keys], dtype=float)
        return bool(np.allclose(a, b, rtol=tol, atol=tol))

    def __repr__(self) -> str:
        if not self.data_store:
            return f"SparseMatrix({self.row_count}x{self.col_count}, {{}})"
        items_str = ", ".join(f"{k}: {v}" for k, v in sorted(self.data_store.items()))
        return f"SparseMatrix({self.row_count}x{self.col_count}, {{{items_str}}})"

    def clear(self) -> None:
        """Removes all elements from the matrix, keeping its dimensions."""
        self.data_store.clear()

    def copy(self) -> 'SparseMatrix':
        """Returns a copy of the matrix that owns its own entry mapping."""
        return SparseMatrix(self.row_count, self.col_count, self.data_store.copy())

    # ------------------------------------------------------------------
    # constructors and conversions
    # ------------------------------------------------------------------
    @classmethod
    def zeros(cls, rows: int, cols: int) -> 'SparseMatrix':
        return cls(rows, cols)

    @classmethod
    def identity(cls, n: int) -> 'SparseMatrix':
        return cls(n, n, {(i, i): 1 for i in range(n)})

    @classmethod
    def from_dense(cls, array) -> 'SparseMatrix':
        """Build from a 2D array-like, keeping only the non-zero cells."""
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise ValueError(f"from_dense expects a 2D array, got {arr.ndim} dimensions")
        result = cls(int(arr.shape[0]), int(arr.shape[1]))
        rows, cols = np.nonzero(arr)
        for i, j in zip(rows.tolist(), cols.tolist()):
            result[i, j] = arr[i, j]
        return result

    def to_dense(self) -> np.ndarray:
        """Dense numpy copy, for inspection. Integer matrices stay integer."""
        is_int = all(isinstance(v, (int, np.integer)) for v in self.data_store.values())
        dense = np.zeros(self.shape, dtype=np.int64 if is_int else np.float64)
        for (i, j), v in self.data_store.items():
            dense[i, j] = v
        return dense

    @classmethod
    def from_scipy(cls, matrix) -> 'SparseMatrix':
        """Build from any scipy.sparse matrix or array. Duplicate COO entries are summed."""
        coo = sp.coo_matrix(matrix, copy=True)
        coo.sum_duplicates()
        result = cls(int(coo.shape[0]), int(coo.shape[1]))
        for i, j, v in zip(coo.row.tolist(), coo.col.tolist(), coo.data.tolist()):
            result[i, j] = v
        return result

    def to_scipy(self) -> sp.coo_matrix:
        if not self.data_store:
            return sp.coo_matrix(self.shape)
        keys = list(self.data_store.keys())
        rows = np.fromiter((k[0] for k in keys), dtype=np.int64, count=len(keys))
        cols = np.fromiter((k[1] for k in keys), dtype=np.int64, count=len(keys))
        data = np.array([self.data_store[k] for k in keys])
        return sp.coo_matrix((data, (rows, cols)), shape=self.shape)
