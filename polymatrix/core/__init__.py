"""
Core infrastructure for polymatrix.

This module provides shared abstractions and utilities used by the
scalar, matrix and solver packages.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy and status codes
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from polymatrix.core.protocols import Backend
from polymatrix.core.result import Result
from polymatrix.core.exceptions import (
    ErrorCode,
    error_message,
    PolyMatrixError,
    ValidationError,
    NullArgumentError,
    InvalidSizeError,
    TypeMismatchError,
    DimensionError,
    InvalidIndexError,
    AllocationError,
    NumericalError,
    SingularMatrixError,
    DivisionByZeroError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Status codes
    "ErrorCode",
    "error_message",
    # Exceptions
    "PolyMatrixError",
    "ValidationError",
    "NullArgumentError",
    "InvalidSizeError",
    "TypeMismatchError",
    "DimensionError",
    "InvalidIndexError",
    "AllocationError",
    "NumericalError",
    "SingularMatrixError",
    "DivisionByZeroError",
]
