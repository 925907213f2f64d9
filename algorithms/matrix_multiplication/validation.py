from algorithms.errors import (
    DimensionMismatchError,
    EmptyMatrixError,
    NullRowError,
    RaggedMatrixError,
    ZeroCellDisallowedError,
)


def check_rows(matrix, name="matrix"):
    """
    Scans a matrix row by row and raises on the first malformed row.

    A row longer than one column may not hold a zero: zero cells are treated
    as unpopulated values, so [[0, 1], [2, 3]] is rejected while [[0], [1]]
    is accepted.

    Args:
        matrix: Sequence of rows (list of lists or 2-D NumPy array).
        name: Label used in error messages.

    Raises:
        NullRowError: A row, or a cell inside a row, is None.
        RaggedMatrixError: A row's length differs from the first row's length.
        ZeroCellDisallowedError: A zero cell sits in a row wider than one column.
    """
    if matrix is None:
        raise TypeError(f"{name} cannot be None")

    expected_cols = None
    for row_index, row in enumerate(matrix):
        if row is None:
            raise NullRowError(f"{name} rows cannot be null (row {row_index})")
        if expected_cols is None:
            expected_cols = len(row)
        if len(row) != expected_cols:
            raise RaggedMatrixError(
                f"{name} rows must have equal length: row {row_index} has {len(row)} columns, expected {expected_cols}"
            )
        for col_index, value in enumerate(row):
            if value is None:
                raise NullRowError(f"{name} row {row_index} has a null cell at column {col_index}")
            if value == 0 and len(row) > 1:
                raise ZeroCellDisallowedError(
                    f"{name} cannot contain null values: zero at ({row_index}, {col_index})"
                )


def get_dimensions(matrix):
    """Returns (row_count, column_count) of a matrix already checked by check_rows."""
    rows = len(matrix)
    cols = len(matrix[0]) if rows > 0 else 0
    return rows, cols


def validate_for_multiplication(left, right):
    """
    Validates two matrices before multiplication. Returns None when the pair is
    well-formed and compatible; otherwise raises the first violation found.

    Order: left matrix rows, right matrix rows, emptiness of both, then the
    left-columns / right-rows compatibility check.
    """
    check_rows(left, "Left matrix")
    check_rows(right, "Right matrix")

    left_rows, left_cols = get_dimensions(left)
    right_rows, right_cols = get_dimensions(right)

    if left_rows == 0 or right_rows == 0:
        raise EmptyMatrixError("Matrices cannot be empty")
    if left_cols == 0 or right_cols == 0:
        raise EmptyMatrixError("Matrices must have at least one column")

    if left_cols != right_rows:
        raise DimensionMismatchError(
            f"Invalid matrix dimensions for multiplication: "
            f"{left_rows}x{left_cols} cannot multiply {right_rows}x{right_cols}"
        )
