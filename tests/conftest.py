"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymat3d import Matrix3D, Vector3D


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m0():
    """Descending negative matrix (-9..-1)."""
    return Matrix3D(
        Vector3D(-9.0, -8.0, -7.0),
        Vector3D(-6.0, -5.0, -4.0),
        Vector3D(-3.0, -2.0, -1.0),
    )


@pytest.fixture
def m1():
    """Ascending matrix 1..9 (singular, determinant 0)."""
    return Matrix3D(
        Vector3D(1.0, 2.0, 3.0),
        Vector3D(4.0, 5.0, 6.0),
        Vector3D(7.0, 8.0, 9.0),
    )


@pytest.fixture
def m2():
    """Invertible matrix with determinant -3."""
    return Matrix3D(
        Vector3D(1.0, 2.0, 4.0),
        Vector3D(4.0, 5.0, 6.0),
        Vector3D(7.0, 8.0, 9.0),
    )


@pytest.fixture
def random_matrices(rng):
    """Twenty standard-normal 3x3 matrices as (Matrix3D, ndarray) pairs."""
    arrays = rng.standard_normal((20, 3, 3))
    return [(Matrix3D.from_array(a), a) for a in arrays]
