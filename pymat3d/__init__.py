"""
pymat3d: immutable 3D vector and 3x3 matrix algebra.

Small value types for geometric code (transforms, cross products) with
an explicit, catchable failure for singular inverses.

Submodules:
    algebra: Vector3D and Matrix3D
    core: Exceptions, tolerances and validation shared by the algebra types
"""

__version__ = "0.1.0"

from pymat3d.algebra import Vector3D, Matrix3D
from pymat3d.core.exceptions import (
    Mat3DError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    "Vector3D",
    "Matrix3D",
    "Mat3DError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
