"""
Generic result container for polymatrix solvers.

Solvers return their payload wrapped in a Result so that timing, warnings
and backend identity travel with the numbers regardless of which solver
produced them.

Design decisions:
    - Generic over parameter payload P
    - info dict for solver metadata (method, pivots, row swaps)
    - timing is optional (tests can build results without it)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The solver-specific parameter payload type

    Attributes:
        params: Solver-specific payload (solution vector, pivots, ...)
        info: Structured metadata (method, row swaps, scalar type)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=GaussParams(solution=x, pivots=(0, 2, 2), row_swaps=1,
        ...                        inexact_divisions=0),
        ...     info={'method': 'gauss_partial_pivot', 'scalar_type': 'float'},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_gauss'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
