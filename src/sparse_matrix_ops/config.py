from typing import Literal
from dataclasses import dataclass

from .constants import DEFAULT_OUTPUT_PATH, MULTIPLY_METHODS
from .matrix_errors import InvalidMultiplyMethodError, SparseMatrixConfigError


@dataclass
class MatrixConfig:
    """
    Configuration for running sparse matrix operations.

    Controls which multiplication algorithm is used, where results are written
    and whether the runner reports progress.
    """

    multiply_method: Literal['grouped', 'pairwise'] = 'grouped'
    """Algorithm used for multiplication:
    - 'grouped': index the right operand by row, visit only matching contraction indices
    - 'pairwise': nested scan over every pair of non-zero entries
    Both produce identical results.
    """

    output_path: str = DEFAULT_OUTPUT_PATH
    """File the runner writes the result matrix to when no explicit path is given."""

    verbose: bool = True
    """Whether the runner prints progress and timing information."""

    def validate(self) -> None:
        """Validate configuration parameters."""
        if self.multiply_method not in MULTIPLY_METHODS:
            raise InvalidMultiplyMethodError(self.multiply_method, MULTIPLY_METHODS)
        if not self.output_path:
            raise SparseMatrixConfigError("output_path cannot be empty")
