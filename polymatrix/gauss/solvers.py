"""
Solver dispatch for Gauss elimination.

This module provides the solve() function (public API) and backend selection.
"""

from __future__ import annotations

import math
import warnings
from typing import Literal

from polymatrix.core.exceptions import ValidationError
from polymatrix.core.protocols import Backend
from polymatrix.gauss.backends.cpu import GaussEliminationBackend
from polymatrix.gauss.design import LinearSystem
from polymatrix.gauss.solution import GaussSolution
from polymatrix.matrix.dense import Matrix


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_gauss']


def solve(
    A: Matrix | LinearSystem,
    b: Matrix | None = None,
    x: Matrix | None = None,
    *,
    backend: BackendChoice = 'auto',
    pivot_tolerance: float | None = None,
) -> GaussSolution:
    """
    Solve the square linear system A·x = b by Gauss elimination.

    This is the primary public API for solving. Validation, backend
    selection and result wrapping all happen here; validation finishes
    before anything is allocated.

    Args:
        A: Coefficient matrix (n x n), or a prebuilt LinearSystem
        b: Right-hand side (n x 1). Required unless A is a LinearSystem.
        x: Optional output vector (n x 1). When given, the solution is
           written into it; on failure it is left untouched.
        backend: Computational backend to use:
            - 'auto': Select best available (currently the CPU backend)
            - 'cpu' / 'cpu_gauss': Gauss elimination with partial pivoting
        pivot_tolerance: Override for the scalar kind's singularity
            threshold (float default 1e-10, integer default 0)

    Returns:
        GaussSolution with the solution vector and diagnostics

    Raises:
        NullArgumentError: If A or b is missing, or a matrix was released
        TypeMismatchError: If A, b, x do not share one scalar type
        DimensionError: If A is not square or b / x are not n x 1
        SingularMatrixError: If A has no unique solution
        ValidationError: If pivot_tolerance is negative or not finite

    Example:
        >>> from polymatrix import FLOAT32
        >>> from polymatrix.gauss import LinearSystem, solve
        >>> system = LinearSystem.from_lists(
        ...     [[2, 1, -1], [1, 3, 2], [3, 2, -3]], [7, 11, 9], FLOAT32)
        >>> [round(v, 2) for v in solve(system).values]
        [3.5, 1.5, 1.5]
    """
    # === Construct Design ===
    if isinstance(A, LinearSystem):
        if b is not None or x is not None:
            raise ValueError("b and x must not be given together with a LinearSystem")
        design = A
    else:
        design = LinearSystem.from_matrices(A, b, x)

    if pivot_tolerance is not None:
        _check_pivot_tolerance(pivot_tolerance)

    # === Select Backend ===
    backend_impl = _get_backend(backend, pivot_tolerance)

    # === Solve ===
    result = backend_impl.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    # === Wrap and Return ===
    return GaussSolution(_result=result, _design=design)


def _check_pivot_tolerance(value: float) -> None:
    if not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
        raise ValidationError(
            f"pivot_tolerance: expected a finite non-negative number, got {value!r}"
        )


def _get_backend(choice: BackendChoice, pivot_tolerance: float | None) -> Backend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_gauss'):
        return GaussEliminationBackend(pivot_tolerance=pivot_tolerance)
    raise ValueError(f"Unknown backend: {choice!r}")
