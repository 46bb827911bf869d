"""
Fixed-size 3D algebra.

Public API:
    Vector3D  - 3-component vector (dot, cross, scale)
    Matrix3D  - 3x3 matrix (products, transpose, determinant, inverse)
"""

from pymat3d.algebra.vector import Vector3D
from pymat3d.algebra.matrix import Matrix3D

__all__ = [
    "Vector3D",
    "Matrix3D",
]
