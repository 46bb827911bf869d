"""
Exception hierarchy for pymat3d.

All exceptions inherit from Mat3DError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Floating-point edge cases (NaN, Inf, overflow) are never raised here
"""


class Mat3DError(Exception):
    """Base exception for all pymat3d errors."""
    pass


class ValidationError(Mat3DError):
    """
    Input validation failed.

    Raised when a vector or matrix is built from values that are not
    real numbers, or a matrix row is not a Vector3D.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when an array-like handed to from_array() does not have the
    shape of a 3-vector or a 3x3 matrix.
    """
    pass


class NumericalError(Mat3DError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised by Matrix3D.inverse() when the determinant falls inside the
    singularity band.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that triggered the failure
        lower: Inclusive lower bound of the band that was applied
        upper: Exclusive upper bound of the band that was applied
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        lower: float | None = None,
        upper: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.lower = lower
        self.upper = upper
