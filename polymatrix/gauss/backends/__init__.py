"""
Gauss solver backends.

Available backends:
    GaussEliminationBackend: CPU reference elimination with partial pivoting
"""

from polymatrix.gauss.backends.cpu import GaussEliminationBackend

__all__ = [
    "GaussEliminationBackend",
]
