"""
CPU reference backend for Gauss elimination.

Forward elimination with partial pivoting on an augmented [A | b] working
matrix, then back substitution. All element arithmetic goes through the
system's ScalarType, so integer systems are solved with truncating
integer division at every step; the backend never promotes types.
"""

from typing import Any

from polymatrix.core.compute.timing import Timer
from polymatrix.core.exceptions import SingularMatrixError
from polymatrix.core.result import Result
from polymatrix.gauss.design import LinearSystem
from polymatrix.gauss.solution import GaussParams
from polymatrix.matrix.dense import Matrix


class GaussEliminationBackend:
    """
    Gauss elimination with partial pivoting.

    Implements the Backend protocol for LinearSystem -> GaussParams.
    """

    def __init__(self, pivot_tolerance: float | None = None):
        """
        Args:
            pivot_tolerance: Overrides the scalar kind's default threshold
                             below which a pivot is treated as zero
        """
        self._pivot_tolerance = pivot_tolerance

    @property
    def name(self) -> str:
        return 'cpu_gauss'

    def solve(self, design: LinearSystem) -> Result[GaussParams]:
        """
        Solve A·x = b.

        Algorithm:
            1. Copy A and b into an n x (n+1) augmented matrix
            2. For each column k: pick the largest-magnitude pivot among
               rows k..n-1, reject it if negligible, swap it into row k,
               and eliminate column k from the rows below
            3. Back substitution from the last row up

        Args:
            design: Validated linear system

        Returns:
            Result containing GaussParams

        Raises:
            SingularMatrixError: If some column has no usable pivot
        """
        timer = Timer()
        timer.start()

        kind = design.scalar_type
        n = design.n
        tolerance = (
            kind.pivot_tolerance if self._pivot_tolerance is None
            else self._pivot_tolerance
        )
        pivots: list[int] = []
        row_swaps = 0
        inexact = 0

        # === Augmented matrix [A | b] ===
        with timer.section('augment'):
            augmented = Matrix.create(n, n + 1, kind)
            W = augmented._grid()
            W[:, :n] = design.A._grid()
            W[:, n] = design.b._grid()[:, 0]

        try:
            # === Forward elimination ===
            with timer.section('forward_elimination'):
                for k in range(n):
                    pivot_row = k
                    best = kind.magnitude(W[k, k])
                    for i in range(k + 1, n):
                        candidate = kind.magnitude(W[i, k])
                        if candidate > best:
                            pivot_row, best = i, candidate

                    if kind.is_negligible(W[pivot_row, k], tolerance):
                        raise SingularMatrixError(
                            f"A is singular: no usable pivot in column {k} "
                            f"(best |pivot| = {kind.format(best)}, "
                            f"tolerance = {tolerance:g})",
                            matrix_name='A',
                            pivot_column=k,
                            pivot_magnitude=float(best),
                            tolerance=tolerance,
                        )

                    pivots.append(pivot_row)
                    if pivot_row != k:
                        W[[k, pivot_row]] = W[[pivot_row, k]]
                        row_swaps += 1

                    pivot = W[k, k]
                    for i in range(k + 1, n):
                        if W[i, k] == kind.zero:
                            continue
                        factor = kind.div(W[i, k], pivot)
                        if kind.is_integral and kind.mul(factor, pivot) != W[i, k]:
                            inexact += 1
                        for j in range(k, n + 1):
                            W[i, j] = kind.sub(W[i, j], kind.mul(factor, W[k, j]))

            # === Back substitution ===
            with timer.section('back_substitution'):
                solution = Matrix.create(n, 1, kind)
                X = solution._grid()
                for i in range(n - 1, -1, -1):
                    acc = W[i, n]
                    for j in range(i + 1, n):
                        acc = kind.sub(acc, kind.mul(W[i, j], X[j, 0]))
                    quotient = kind.div(acc, W[i, i])
                    if kind.is_integral and kind.mul(quotient, W[i, i]) != acc:
                        inexact += 1
                    X[i, 0] = quotient
        finally:
            augmented.release()

        if design.x is not None:
            design.x._storage()[:] = solution._storage()
            solution.release()
            solution = design.x

        timer.stop()

        messages: tuple[str, ...] = ()
        if inexact:
            messages = (
                f"{inexact} inexact integer division(s) truncated toward zero; "
                f"solve in float for a non-integral solution",
            )

        params = GaussParams(
            solution=solution,
            pivots=tuple(pivots),
            row_swaps=row_swaps,
            inexact_divisions=inexact,
        )

        info: dict[str, Any] = {
            'method': 'gauss_partial_pivot',
            'n': n,
            'scalar_type': kind.name,
            'pivot_tolerance': tolerance,
            'row_swaps': row_swaps,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=messages,
        )
