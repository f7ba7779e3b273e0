ROWS_KEY = "Rows"
COLS_KEY = "Cols"
HEADER_SEPARATOR = "="
ENTRY_SEPARATOR = ","

DEFAULT_OUTPUT_PATH = "result_matrix.txt"

MULTIPLY_METHODS = ['grouped', 'pairwise']
OPERATIONS = ['add', 'subtract', 'multiply']

class MatrixColumn:
    ROW = "row"
    COL = "col"
    VALUE = "value"
