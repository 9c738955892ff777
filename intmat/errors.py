class MatrixError(Exception):
    """Base class for every error raised by intmat."""


class AllocationError(MatrixError, MemoryError):
    pass


class DimensionError(MatrixError, ValueError):
    pass


class RangeError(MatrixError, ValueError):
    pass


class FormatError(MatrixError, ValueError):
    pass
