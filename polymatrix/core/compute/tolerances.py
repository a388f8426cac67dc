"""
Tolerance tiers for pivoting and verification.

Pivot tolerances decide when Gauss elimination declares a matrix
singular. Verification tolerances decide how closely A·x must reproduce
b before a float32 solution is considered correct.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from polymatrix.scalars.base import ScalarType


@dataclass(frozen=True)
class PivotTolerance:
    """Threshold below which a pivot counts as zero."""
    threshold: float
    name: str
    description: str


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Float pivots strictly smaller than this are treated as zero
FLOAT32_PIVOT = PivotTolerance(
    threshold=1e-10,
    name='float32_pivot',
    description='Single precision: |pivot| < 1e-10 is singular',
)

# Integer pivots are singular only when exactly zero
INTEGER_PIVOT = PivotTolerance(
    threshold=0.0,
    name='integer_pivot',
    description='Integer: pivot == 0 is singular',
)

# Residual check for float32 solves of small, well-conditioned systems
VERIFY_FLOAT32 = ToleranceTier(
    rtol=0.0,
    atol=1e-2,
    name='verify_float32',
    description='Single precision solve, |A·x - b| per row',
)

# Integer solves are checked exactly
VERIFY_INTEGER = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='verify_integer',
    description='Integer solve, exact reproduction of b',
)


def select_pivot_tolerance(scalar_type: ScalarType) -> PivotTolerance:
    """Select the pivot tolerance tier for a scalar kind."""
    if scalar_type.is_integral:
        return INTEGER_PIVOT
    return FLOAT32_PIVOT


def select_verify_tolerance(scalar_type: ScalarType) -> ToleranceTier:
    """Select the residual tolerance tier for a scalar kind."""
    if scalar_type.is_integral:
        return VERIFY_INTEGER
    return VERIFY_FLOAT32
