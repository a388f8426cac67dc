"""
Exception hierarchy for polymatrix.

All exceptions inherit from PolyMatrixError to allow catching any
library-specific error. Every concrete error carries a discrete
ErrorCode so callers that prefer status codes (menus, bindings, logs)
can map an exception to a stable integer and back to a message.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Discrete status codes, one per failure kind."""
    OK = 0
    NULL_POINTER = -1
    OUT_OF_MEMORY = -2
    INVALID_SIZE = -3
    TYPE_MISMATCH = -4
    DIMENSION_MISMATCH = -5
    INVALID_INDEX = -6
    SINGULAR_MATRIX = -7
    DIVISION_BY_ZERO = -8


_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.OK: "Success",
    ErrorCode.NULL_POINTER: "Missing argument or released matrix",
    ErrorCode.OUT_OF_MEMORY: "Memory allocation failed",
    ErrorCode.INVALID_SIZE: "Invalid matrix size",
    ErrorCode.TYPE_MISMATCH: "Scalar type mismatch",
    ErrorCode.DIMENSION_MISMATCH: "Dimension mismatch",
    ErrorCode.INVALID_INDEX: "Index out of range",
    ErrorCode.SINGULAR_MATRIX: "Singular matrix",
    ErrorCode.DIVISION_BY_ZERO: "Division by zero",
}


def error_message(code: ErrorCode | int) -> str:
    """
    Human-readable message for a status code.

    Args:
        code: An ErrorCode member or its integer value

    Returns:
        The message, or "Unknown error" for values outside ErrorCode
    """
    try:
        return _MESSAGES[ErrorCode(code)]
    except ValueError:
        return "Unknown error"


class PolyMatrixError(Exception):
    """Base exception for all polymatrix errors."""
    code: ErrorCode | None = None


class ValidationError(PolyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail precondition checks. Nothing
    has been allocated or mutated when this is raised.
    """
    pass


class NullArgumentError(ValidationError):
    """
    A required argument is None, or a matrix has already been released.
    """
    code = ErrorCode.NULL_POINTER


class InvalidSizeError(ValidationError):
    """Matrix dimensions are not positive integers."""
    code = ErrorCode.INVALID_SIZE


class TypeMismatchError(ValidationError):
    """
    Operands use incompatible scalar types, or a value cannot be
    represented by the matrix's scalar type.
    """
    code = ErrorCode.TYPE_MISMATCH


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when shapes don't match what an operation requires (add with
    different shapes, multiply with a.cols != b.rows, non-square identity).
    """
    code = ErrorCode.DIMENSION_MISMATCH


class InvalidIndexError(ValidationError, IndexError):
    """
    Element or row index outside the matrix.

    Attributes:
        index: The offending (row, col) or row index
        shape: Shape of the matrix that was indexed
    """
    code = ErrorCode.INVALID_INDEX

    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | int | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class AllocationError(PolyMatrixError, MemoryError):
    """
    Storage for a matrix could not be allocated.

    Attributes:
        shape: Requested (rows, cols)
    """
    code = ErrorCode.OUT_OF_MEMORY

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(PolyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised by the Gauss solver when no pivot with a usable magnitude
    exists in the current column, so the system has no unique solution.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_column: Elimination step at which the pivot vanished
        pivot_magnitude: Magnitude of the best available pivot
        tolerance: Threshold the pivot was compared against
    """
    code = ErrorCode.SINGULAR_MATRIX

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_column: int | None = None,
        pivot_magnitude: float | None = None,
        tolerance: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_column = pivot_column
        self.pivot_magnitude = pivot_magnitude
        self.tolerance = tolerance


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """
    A scalar division had an exact-zero divisor.

    Attributes:
        scalar_type: Name of the scalar kind that performed the division
        dividend: The value that was being divided
    """
    code = ErrorCode.DIVISION_BY_ZERO

    def __init__(
        self,
        message: str,
        scalar_type: str | None = None,
        dividend: float | int | None = None
    ):
        super().__init__(message)
        self.scalar_type = scalar_type
        self.dividend = dividend
