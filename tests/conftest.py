"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymlmath import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a_2x3():
    """A = [[1, 2, 3], [4, 5, 6]]."""
    return Matrix(2, 3, [1, 2, 3, 4, 5, 6])


@pytest.fixture
def b_3x2():
    """B = [[7, 8], [9, 10], [11, 12]]."""
    return Matrix(3, 2, [7, 8, 9, 10, 11, 12])


@pytest.fixture
def random_vectors(rng):
    """Pair of equal-length random vectors."""
    n = 50
    return Vector(rng.standard_normal(n)), Vector(rng.standard_normal(n))
