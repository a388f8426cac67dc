"""
Dense matrix storage.

A Matrix owns a flat numpy buffer of rows * cols scalars of one kind,
laid out row-major: element (r, c) lives at offset r * cols + c. The
buffer dtype comes from the matrix's ScalarType, which is shared with
every other matrix of that kind and never changes after creation.

Every element access goes through _offset(), which is the single place
where liveness and bounds are checked.
"""

from __future__ import annotations

from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray

from polymatrix.core.exceptions import AllocationError, DimensionError
from polymatrix.core.validation import (
    check_dimension,
    check_index,
    check_live,
    check_not_none,
    check_scalar_type,
    check_square,
)
from polymatrix.scalars.base import ScalarType


def _allocate(rows: int, cols: int, scalar_type: ScalarType) -> NDArray[Any]:
    """Zero-filled row-major buffer for a rows x cols matrix."""
    try:
        return np.zeros(rows * cols, dtype=scalar_type.dtype)
    except (MemoryError, ValueError, OverflowError) as e:
        raise AllocationError(
            f"cannot allocate {rows}x{cols} {scalar_type.name} matrix "
            f"({rows * cols * scalar_type.size} bytes): {e}",
            shape=(rows, cols),
        ) from e


class Matrix:
    """
    Dense rows x cols matrix over a single scalar kind.

    Do not construct directly; use Matrix.create(), Matrix.from_rows()
    or Matrix.identity_of().

    The caller owns every matrix it receives. release() drops the buffer;
    any later use of the handle raises NullArgumentError. A Matrix is also
    a context manager that releases itself on exit.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        scalar_type: ScalarType,
        data: NDArray[Any],
    ):
        self._rows = rows
        self._cols = cols
        self._scalar_type = scalar_type
        self._data: NDArray[Any] | None = data

    # === Construction ===

    @classmethod
    def create(cls, rows: int, cols: int, scalar_type: ScalarType) -> Matrix:
        """
        Create a zero-filled matrix.

        Args:
            rows: Number of rows (positive)
            cols: Number of columns (positive)
            scalar_type: Descriptor of the element kind

        Returns:
            A fresh matrix owned by the caller

        Raises:
            NullArgumentError: If scalar_type is None
            InvalidSizeError: If rows or cols is not a positive integer
            AllocationError: If the buffer cannot be allocated
        """
        check_scalar_type(scalar_type, 'scalar_type')
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        return cls(rows, cols, scalar_type, _allocate(rows, cols, scalar_type))

    @classmethod
    def from_rows(cls, values: Sequence[Sequence[Any]], scalar_type: ScalarType) -> Matrix:
        """
        Build a matrix from nested row sequences.

        Every value is converted with scalar_type.coerce(), so an integer
        matrix rejects non-integral floats.

        Raises:
            InvalidSizeError: If there are no rows or the first row is empty
            DimensionError: If rows have different lengths
            TypeMismatchError: If a value cannot be stored in this kind
        """
        check_not_none(values, 'values')
        check_scalar_type(scalar_type, 'scalar_type')
        rows = check_dimension(len(values), 'rows')
        cols = check_dimension(len(values[0]), 'cols')
        for i, row in enumerate(values):
            if len(row) != cols:
                raise DimensionError(
                    f"values: row {i} has {len(row)} entries, expected {cols}"
                )
        coerced = [scalar_type.coerce(v) for row in values for v in row]
        data = _allocate(rows, cols, scalar_type)
        data[:] = coerced
        return cls(rows, cols, scalar_type, data)

    @classmethod
    def identity_of(cls, n: int, scalar_type: ScalarType) -> Matrix:
        """Create an n x n identity matrix."""
        matrix = cls.create(n, n, scalar_type)
        matrix.identity()
        return matrix

    # === Properties ===

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def scalar_type(self) -> ScalarType:
        """Element descriptor (shared, never owned by the matrix)."""
        return self._scalar_type

    @property
    def released(self) -> bool:
        """True once release() has dropped the buffer."""
        return self._data is None

    # === Storage access ===

    def _storage(self) -> NDArray[Any]:
        """Live flat buffer. Engine-internal."""
        check_live(self, 'matrix')
        return self._data

    def _grid(self) -> NDArray[Any]:
        """Live (rows, cols) view of the buffer. Engine-internal."""
        return self._storage().reshape(self._rows, self._cols)

    def _offset(self, row: int, col: int) -> int:
        """Flat buffer offset of (row, col), bounds-checked."""
        check_live(self, 'matrix')
        row = check_index(row, self._rows, 'row', self.shape)
        col = check_index(col, self._cols, 'col', self.shape)
        return row * self._cols + col

    def get(self, row: int, col: int) -> Any:
        """
        Read element (row, col).

        Raises:
            NullArgumentError: If the matrix has been released
            InvalidIndexError: If row >= rows or col >= cols
        """
        return self._data[self._offset(row, col)]

    def set(self, row: int, col: int, value: Any) -> None:
        """
        Write element (row, col).

        Raises:
            NullArgumentError: If value is None or the matrix was released
            InvalidIndexError: If row >= rows or col >= cols
            TypeMismatchError: If value cannot be stored in this kind
        """
        check_not_none(value, 'value')
        offset = self._offset(row, col)
        self._data[offset] = self._scalar_type.coerce(value)

    # === Whole-matrix operations ===

    def clone(self) -> Matrix:
        """Independent deep copy sharing the same scalar type."""
        data = self._storage()
        copy = _allocate(self._rows, self._cols, self._scalar_type)
        copy[:] = data
        return Matrix(self._rows, self._cols, self._scalar_type, copy)

    def fill(self, value: Any) -> None:
        """Overwrite every element with value."""
        check_not_none(value, 'value')
        data = self._storage()
        data[:] = self._scalar_type.coerce(value)

    def identity(self) -> None:
        """
        Turn this square matrix into the identity in place.

        Raises:
            DimensionError: If the matrix is not square
        """
        data = self._storage()
        check_square(self, 'matrix')
        data[:] = self._scalar_type.zero
        data[::self._cols + 1] = self._scalar_type.one

    def release(self) -> None:
        """Drop the buffer. Releasing twice is harmless."""
        self._data = None

    def __enter__(self) -> Matrix:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release()

    # === Conversion ===

    def to_array(self) -> NDArray[Any]:
        """Copy of the contents as a (rows, cols) numpy array."""
        return self._storage().reshape(self._rows, self._cols).copy()

    def to_list(self) -> list[list[Any]]:
        """Contents as nested Python lists of Python scalars."""
        return self._storage().reshape(self._rows, self._cols).tolist()

    def __repr__(self) -> str:
        state = ", released" if self.released else ""
        return (
            f"Matrix(rows={self._rows}, cols={self._cols}, "
            f"scalar_type={self._scalar_type.name!r}{state})"
        )
