"""
Gauss solver solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from polymatrix.core.compute.tolerances import select_verify_tolerance
from polymatrix.core.result import Result
from polymatrix.matrix.arithmetic import multiply, subtract
from polymatrix.matrix.dense import Matrix
from polymatrix.matrix.textio import format_matrix

if TYPE_CHECKING:
    from polymatrix.gauss.design import LinearSystem


@dataclass(frozen=True)
class GaussParams:
    """
    Parameter payload for Gauss elimination.

    This is the immutable data computed by backends.
    """
    solution: Matrix
    pivots: tuple[int, ...]
    row_swaps: int
    inexact_divisions: int


@dataclass
class GaussSolution:
    """
    User-facing solve results.

    Wraps the backend Result and adds verification helpers that recompute
    A·x through the matrix engine.
    """
    _result: Result[GaussParams]
    _design: 'LinearSystem'

    @property
    def x(self) -> Matrix:
        """Solution vector (n x 1)."""
        return self._result.params.solution

    @property
    def values(self) -> list[Any]:
        """Solution as a flat Python list."""
        return [row[0] for row in self.x.to_list()]

    @property
    def pivots(self) -> tuple[int, ...]:
        """Row chosen as pivot at each elimination step."""
        return self._result.params.pivots

    @property
    def row_swaps(self) -> int:
        return self._result.params.row_swaps

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def residuals(self) -> Matrix:
        """b - A·x, computed with the system's scalar arithmetic."""
        return subtract(self._design.b, multiply(self._design.A, self.x))

    def max_abs_residual(self) -> float:
        """Largest |b_i - (A·x)_i|."""
        r = self.residuals()
        kind = r.scalar_type
        return max(float(kind.magnitude(value)) for value in r._storage())

    def is_verified(self) -> bool:
        """True if A·x reproduces b within the kind's verification tolerance."""
        return self.max_abs_residual() <= select_verify_tolerance(self.x.scalar_type).atol

    def summary(self) -> str:
        """Text report of the system and its solution."""
        lines = [
            f"Gauss elimination ({self.backend_name}), "
            f"n={self._design.n}, scalar type={self.x.scalar_type.name}",
            format_matrix(self._design.A, 'A'),
            format_matrix(self._design.b, 'b'),
            format_matrix(self.x, 'x'),
            f"Row swaps: {self.row_swaps}",
            f"Max |b - A*x|: {self.max_abs_residual():.6g}",
        ]
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GaussSolution(n={self._design.n}, "
            f"scalar_type={self.x.scalar_type.name!r}, values={self.values})"
        )
