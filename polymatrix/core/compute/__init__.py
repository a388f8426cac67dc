"""
Shared compute infrastructure for polymatrix.

Elimination itself lives in gauss/backends/; this package only holds
the timer and the thresholds the backends consult.

Submodules:
    timing: Execution timing utilities
    tolerances: Pivot and verification tolerance tiers
"""

from polymatrix.core.compute.timing import Timer, timed
from polymatrix.core.compute.tolerances import (
    PivotTolerance,
    ToleranceTier,
    FLOAT32_PIVOT,
    INTEGER_PIVOT,
    VERIFY_FLOAT32,
    VERIFY_INTEGER,
    select_pivot_tolerance,
    select_verify_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "PivotTolerance",
    "ToleranceTier",
    "FLOAT32_PIVOT",
    "INTEGER_PIVOT",
    "VERIFY_FLOAT32",
    "VERIFY_INTEGER",
    "select_pivot_tolerance",
    "select_verify_tolerance",
]
