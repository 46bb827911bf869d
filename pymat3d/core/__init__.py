"""
Core infrastructure for pymat3d.

Shared pieces used by the algebra types.

Key components:
    exceptions: Exception hierarchy
    tolerances: Singularity band and comparison tolerances
    validation: Input validators
"""

from pymat3d.core.exceptions import (
    Mat3DError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)
from pymat3d.core.tolerances import (
    SingularityBand,
    ToleranceTier,
    SINGULAR_DETERMINANT,
    DEFAULT,
    FP32,
    select_tolerance,
)

__all__ = [
    # Exceptions
    "Mat3DError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    # Tolerances
    "SingularityBand",
    "ToleranceTier",
    "SINGULAR_DETERMINANT",
    "DEFAULT",
    "FP32",
    "select_tolerance",
]
