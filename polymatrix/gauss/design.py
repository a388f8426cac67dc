"""
Linear system design.

LinearSystem wraps the coefficient matrix A, the right-hand side b and an
optional caller-supplied output vector x, after checking that they form a
solvable square system over one scalar kind. Backends trust a
LinearSystem and never re-validate it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from polymatrix.core.validation import (
    check_column_vector,
    check_live,
    check_same_type,
    check_square,
)
from polymatrix.matrix.dense import Matrix
from polymatrix.scalars.base import ScalarType


@dataclass(frozen=True)
class LinearSystem:
    """
    Square system A·x = b.

    Construction:
        LinearSystem.from_matrices(A, b)          # solver allocates x
        LinearSystem.from_matrices(A, b, x)       # solution written into x
        LinearSystem.from_lists(A_rows, b, kind)  # convenience for literals
    """
    _A: Matrix
    _b: Matrix
    _x: Matrix | None
    _n: int

    @classmethod
    def from_matrices(cls, A: Matrix, b: Matrix, x: Matrix | None = None) -> LinearSystem:
        """
        Validate and wrap existing matrices.

        Checks run in this order and the first failure is raised:
        presence, shared scalar type, then shapes.

        Raises:
            NullArgumentError: If A or b is None, or any matrix was released
            TypeMismatchError: If A, b, x do not share one scalar type
            DimensionError: If A is not square, or b / x are not n x 1
        """
        check_live(A, 'A')
        check_live(b, 'b')
        if x is not None:
            check_live(x, 'x')

        check_same_type(A, b, names=('A', 'b'))
        if x is not None:
            check_same_type(A, x, names=('A', 'x'))

        check_square(A, 'A')
        n = A.rows
        check_column_vector(b, n, 'b')
        if x is not None:
            check_column_vector(x, n, 'x')

        return cls(_A=A, _b=b, _x=x, _n=n)

    @classmethod
    def from_lists(
        cls,
        A: Sequence[Sequence[Any]],
        b: Sequence[Any],
        scalar_type: ScalarType,
    ) -> LinearSystem:
        """Build a system from nested lists of coefficients and a flat b."""
        A_mat = Matrix.from_rows(A, scalar_type)
        b_mat = Matrix.from_rows([[value] for value in b], scalar_type)
        return cls.from_matrices(A_mat, b_mat)

    # === Properties ===

    @property
    def A(self) -> Matrix:
        """Coefficient matrix (n x n)."""
        return self._A

    @property
    def b(self) -> Matrix:
        """Right-hand side (n x 1)."""
        return self._b

    @property
    def x(self) -> Matrix | None:
        """Caller-supplied output vector, if any."""
        return self._x

    @property
    def n(self) -> int:
        """Number of unknowns."""
        return self._n

    @property
    def scalar_type(self) -> ScalarType:
        return self._A.scalar_type
