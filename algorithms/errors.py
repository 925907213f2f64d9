class ArrayProcessingError(ValueError):
    """Base class for every error raised by the array and matrix routines."""


class InvalidArgumentError(ArrayProcessingError):
    """An index, range or ordering precondition on an array argument does not hold."""


class MatrixValidationError(ArrayProcessingError):
    """A matrix pair is malformed or cannot be multiplied."""


class NullRowError(MatrixValidationError):
    pass


class RaggedMatrixError(MatrixValidationError):
    pass


class ZeroCellDisallowedError(MatrixValidationError):
    pass


class EmptyMatrixError(MatrixValidationError):
    pass


class DimensionMismatchError(MatrixValidationError):
    pass
