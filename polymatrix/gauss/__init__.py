"""
Square linear systems by Gauss elimination.

Public API:
    solve(A, b, x=None, ...) -> GaussSolution

The solve() function is the only entry point. It handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from polymatrix.gauss import solve
    >>> result = solve(A, b)
    >>> print(result.values)
    >>> print(result.summary())
"""

from polymatrix.gauss.design import LinearSystem
from polymatrix.gauss.solution import GaussSolution, GaussParams
from polymatrix.gauss.solvers import solve

__all__ = [
    "solve",
    "LinearSystem",
    "GaussSolution",
    "GaussParams",
]
