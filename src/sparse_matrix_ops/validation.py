from .sparse_matrix import SparseMatrix
from .matrix_errors import DimensionMismatchError


def validate_same_shape(a: SparseMatrix, b: SparseMatrix) -> None:
    """Addition and subtraction need both operands to have identical dimensions."""
    if a.row_count != b.row_count or a.col_count != b.col_count:
        raise DimensionMismatchError("addition/subtraction requires equal dimensions", a.shape, b.shape)


def validate_multiplicable(a: SparseMatrix, b: SparseMatrix) -> None:
    """Multiplication needs the left column count to equal the right row count."""
    if a.col_count != b.row_count:
        raise DimensionMismatchError("multiplication requires left.cols == right.rows", a.shape, b.shape)
