"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from polymatrix.matrix import Matrix
from polymatrix.scalars import FLOAT32, INTEGER


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=[INTEGER, FLOAT32], ids=['int', 'float'])
def scalar_type(request):
    """Each built-in scalar kind in turn."""
    return request.param


@pytest.fixture
def int_pair():
    """Two 2x2 integer matrices with a known sum."""
    a = Matrix.from_rows([[1, 2], [3, 4]], INTEGER)
    b = Matrix.from_rows([[5, 6], [7, 8]], INTEGER)
    return a, b


@pytest.fixture
def float_pair():
    """Two 2x2 float matrices whose values are exact in single precision."""
    a = Matrix.from_rows([[0.5, 1.25], [-2.0, 4.0]], FLOAT32)
    b = Matrix.from_rows([[1.5, -0.25], [0.75, 2.0]], FLOAT32)
    return a, b


@pytest.fixture
def system_3x3():
    """
    3x3 system with solution (3.5, 1.5, 1.5).

    The first column needs a row swap, and in integer arithmetic every
    elimination factor truncates to zero.
    """
    A = [[2, 1, -1], [1, 3, 2], [3, 2, -3]]
    b = [7, 11, 9]
    return A, b
