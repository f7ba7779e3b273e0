"""Run one sparse matrix operation on two matrix files.

Usage:
    python examples/run_operation.py add a.txt b.txt
    python examples/run_operation.py multiply a.txt b.txt -o product.txt --method pairwise
"""

import os
import sys
import argparse

# Add the src directory to Python path to import local sparse_matrix_ops
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


from sparse_matrix_ops import MatrixCalculator, MatrixConfig, SparseMatrixRuntimeError
from sparse_matrix_ops.constants import OPERATIONS, MULTIPLY_METHODS, DEFAULT_OUTPUT_PATH


def main() -> int:
    parser = argparse.ArgumentParser(description="Add, subtract or multiply two sparse matrix files.")
    parser.add_argument("operation", choices=OPERATIONS)
    parser.add_argument("left", help="file holding the left operand")
    parser.add_argument("right", help="file holding the right operand")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT_PATH, help="result file")
    parser.add_argument("--method", choices=MULTIPLY_METHODS, default='grouped', help="multiplication algorithm")
    parser.add_argument("-q", "--quiet", action="store_true", help="suppress progress output")
    args = parser.parse_args()

    config = MatrixConfig(multiply_method=args.method, output_path=args.output, verbose=not args.quiet)
    calculator = MatrixCalculator(config=config)
    try:
        calculator.run(args.operation, args.left, args.right)
    except (SparseMatrixRuntimeError, OSError) as e:
        print(f"Error performing operation: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":

    sys.exit(main())
