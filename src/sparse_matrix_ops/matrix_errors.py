
class SparseMatrixConfigError(ValueError):
    """Base class for sparse matrix configuration errors."""
    pass

class SparseMatrixRuntimeError(ValueError):
    """Base class for errors raised while loading or operating on matrices."""
    pass



class InvalidMultiplyMethodError(SparseMatrixConfigError):
    """Raised when an unknown multiplication method is requested."""

    def __init__(self, method: str, valid_methods: list):
        self.method = method
        self.valid_methods = valid_methods
        message = f"Invalid multiply method '{method}'. Must be one of: {valid_methods}"
        super().__init__(message)


class InvalidOperationError(SparseMatrixConfigError):
    """Raised when an unknown arithmetic operation name is requested."""

    def __init__(self, operation: str, valid_operations: list):
        self.operation = operation
        self.valid_operations = valid_operations
        message = f"Invalid operation '{operation}'. Must be one of: {valid_operations}"
        super().__init__(message)


class FormatError(SparseMatrixRuntimeError):
    """Raised when matrix file content cannot be parsed."""

    def __init__(self, reason: str, line_number: int = None, line: str = None, source: str = None):
        self.reason = reason
        self.line_number = line_number
        self.line = line
        self.source = source

        location = source if source is not None else "<input>"
        if line_number is not None:
            location = f"{location}, line {line_number}"
        message = f"{location}: {reason}"
        if line is not None:
            message += f": {line!r}"
        super().__init__(message)


class DimensionMismatchError(SparseMatrixRuntimeError):
    """Raised when two matrices have incompatible dimensions for an operation."""

    def __init__(self, message: str, left_shape: tuple = None, right_shape: tuple = None):
        self.left_shape = left_shape
        self.right_shape = right_shape
        if left_shape is not None and right_shape is not None:
            message = f"{message} (left is {left_shape[0]}x{left_shape[1]}, right is {right_shape[0]}x{right_shape[1]})"
        super().__init__(message)
