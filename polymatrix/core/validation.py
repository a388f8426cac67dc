"""
Input validation utilities for polymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent. Engine operations call them
before allocating or mutating anything.

Design principles:
    - No silent coercion of sizes or indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import numbers
from typing import Any, TYPE_CHECKING

from polymatrix.core.exceptions import (
    DimensionError,
    InvalidIndexError,
    InvalidSizeError,
    NullArgumentError,
    TypeMismatchError,
)
from polymatrix.scalars.base import ScalarType
from polymatrix.scalars.registry import types_equal

if TYPE_CHECKING:
    from polymatrix.matrix.dense import Matrix


def check_not_none(value: Any, name: str) -> None:
    """
    Verify an argument is present.

    Raises:
        NullArgumentError: If value is None
    """
    if value is None:
        raise NullArgumentError(f"{name}: required argument is None")


def check_live(matrix: Matrix | None, name: str) -> None:
    """
    Verify a matrix is present and has not been released.

    Raises:
        NullArgumentError: If matrix is None or its storage was released
    """
    check_not_none(matrix, name)
    if matrix.released:
        raise NullArgumentError(f"{name}: matrix has been released")


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a dimension is a positive integer.

    Args:
        value: Candidate row or column count
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        InvalidSizeError: If value is not an integer or is < 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidSizeError(
            f"{name}: expected a positive integer, got {value!r} ({type(value).__name__})"
        )
    if value < 1:
        raise InvalidSizeError(f"{name}: must be positive, got {value}")
    return int(value)


def check_index(index: Any, bound: int, name: str, shape: tuple[int, int]) -> int:
    """
    Verify a row or column index lies in [0, bound).

    Raises:
        InvalidIndexError: If index is not an integer or is out of range
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise InvalidIndexError(
            f"{name}: expected an integer index, got {index!r}",
            index=index,
            shape=shape,
        )
    if not 0 <= index < bound:
        raise InvalidIndexError(
            f"{name}: index {index} out of range for size {bound} (shape {shape})",
            index=int(index),
            shape=shape,
        )
    return int(index)


def check_same_type(a: Matrix, b: Matrix, names: tuple[str, str]) -> None:
    """
    Verify two matrices share a scalar type (structural equality).

    Raises:
        TypeMismatchError: If the descriptors differ in name or size
    """
    if not types_equal(a.scalar_type, b.scalar_type):
        raise TypeMismatchError(
            f"Scalar type mismatch: {names[0]}={a.scalar_type.name}, "
            f"{names[1]}={b.scalar_type.name}"
        )


def check_scalar_type(scalar_type: ScalarType | None, name: str) -> None:
    """
    Verify a scalar type descriptor was supplied.

    Raises:
        NullArgumentError: If scalar_type is None
        TypeMismatchError: If scalar_type is not a ScalarType
    """
    check_not_none(scalar_type, name)
    if not isinstance(scalar_type, ScalarType):
        raise TypeMismatchError(
            f"{name}: expected a ScalarType, got {type(scalar_type).__name__}"
        )


def check_same_shape(a: Matrix, b: Matrix, names: tuple[str, str]) -> None:
    """
    Verify two matrices have identical shapes.

    Raises:
        DimensionError: If shapes differ
    """
    if a.shape != b.shape:
        raise DimensionError(
            f"Inconsistent shapes: {names[0]}={a.shape}, {names[1]}={b.shape}"
        )


def check_square(matrix: Matrix, name: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If rows != cols
    """
    if matrix.rows != matrix.cols:
        raise DimensionError(f"{name}: expected a square matrix, got shape {matrix.shape}")


def check_column_vector(matrix: Matrix, n: int, name: str) -> None:
    """
    Verify a matrix is an n x 1 column vector.

    Raises:
        DimensionError: If the shape is not (n, 1)
    """
    if matrix.shape != (n, 1):
        raise DimensionError(f"{name}: expected shape ({n}, 1), got {matrix.shape}")


def check_length(values: Any, expected: int, name: str) -> None:
    """
    Verify a sequence has exactly the expected length.

    Raises:
        NullArgumentError: If values is None
        DimensionError: If the length differs
    """
    check_not_none(values, name)
    if len(values) != expected:
        raise DimensionError(f"{name}: expected {expected} values, got {len(values)}")
