"""
Coordinate-keyed sparse matrices with text file serialization.

Addition, subtraction and sparse-sparse multiplication over matrices that store only their non-zero entries.
"""

__version__ = "0.1.0"

from .sparse_matrix import SparseMatrix
from .matrix_io import load, loads, save, dumps, parse_lines, format_lines, to_dataframe, from_dataframe
from .arithmetic import add, subtract, multiply, apply_operation
from .validation import validate_same_shape, validate_multiplicable
from .matrix_calculator import MatrixCalculator
from .config import MatrixConfig
from .matrix_errors import (
    SparseMatrixConfigError,
    SparseMatrixRuntimeError,
    FormatError,
    DimensionMismatchError,
    InvalidMultiplyMethodError,
    InvalidOperationError,
)

__all__ = [
    "SparseMatrix",
    "load",
    "loads",
    "save",
    "dumps",
    "parse_lines",
    "format_lines",
    "to_dataframe",
    "from_dataframe",
    "add",
    "subtract",
    "multiply",
    "apply_operation",
    "validate_same_shape",
    "validate_multiplicable",
    "MatrixCalculator",
    "MatrixConfig",
    "SparseMatrixConfigError",
    "SparseMatrixRuntimeError",
    "FormatError",
    "DimensionMismatchError",
    "InvalidMultiplyMethodError",
    "InvalidOperationError",
]
