import time
from typing import Optional

from .arithmetic import apply_operation
from .config import MatrixConfig
from .constants import OPERATIONS
from .matrix_errors import InvalidOperationError
from .matrix_io import load, save
from .sparse_matrix import SparseMatrix



class MatrixCalculator:
    """
    Batch runner for sparse matrix arithmetic.

    Loads two matrix files, applies one of the supported operations and writes
    the result back out, recording how long each stage took. Any front end
    (command line, script, service) can drive it; it keeps no state between
    runs other than the last result and its timings.
    """

    def __init__(self, config: MatrixConfig = MatrixConfig()):
        """
        Initialize the MatrixCalculator

        Args:
            config: MatrixConfig object defining how operations are run
        """
        self.config = config
        self.config.validate()

        self.last_result: Optional[SparseMatrix] = None
        self.timings: dict[str, float] = dict()

    def _log(self, msg: str) -> None:
        if self.config.verbose:
            print(msg)

    def run(self, operation: str, left_path: str, right_path: str, output_path: Optional[str] = None) -> SparseMatrix:
        """
        Compute `left <operation> right` from two matrix files and save the result.

        Args:
            operation: One of 'add', 'subtract', 'multiply'
            left_path: File holding the left operand
            right_path: File holding the right operand
            output_path: Where to write the result, defaults to config.output_path

        Returns:
            The result matrix

        Raises:
            InvalidOperationError: Unknown operation name, raised before any file is read
            FormatError, OSError: From loading or saving
            DimensionMismatchError: Operands have incompatible shapes
        """
        if operation not in OPERATIONS:
            raise InvalidOperationError(operation, OPERATIONS)
        output_path = output_path or self.config.output_path
        self.timings = dict()

        self._log(f"=== Computing sparse matrix {operation} ===")
        start_time = time.time()

        st = time.time()
        self._log(f"Loading matrix from: {left_path}")
        left = load(left_path)
        self._log(f"  matrix size: {left.row_count}x{left.col_count}, non-zeros: {left.nnz}")
        self._log(f"Loading matrix from: {right_path}")
        right = load(right_path)
        self._log(f"  matrix size: {right.row_count}x{right.col_count}, non-zeros: {right.nnz}")
        self.timings['load'] = time.time() - st
        self._log(f"  took: {self.timings['load']} seconds")

        st = time.time()
        self._log(f"Computing {operation}")
        result = apply_operation(operation, left, right, self.config)
        self.timings['compute'] = time.time() - st
        self._log(f"  result size: {result.row_count}x{result.col_count}, non-zeros: {result.nnz}")
        self._log(f"  took: {self.timings['compute']} seconds")

        st = time.time()
        save(result, output_path)
        self.timings['save'] = time.time() - st
        self._log(f"Matrix saved to {output_path}")
        self._log(f"  took: {self.timings['save']} seconds")

        self.timings['total'] = time.time() - start_time
        self._log(f"Total time taken: {self.timings['total']} seconds")

        self.last_result = result
        return result
