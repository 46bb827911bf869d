"""
3x3 matrix value type.

Matrix3D stores three Vector3D rows and expresses every operation through
vector products: products and determinants work on the columns obtained
from transpose(), and the inverse is the adjugate built from cross
products of those columns.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymat3d.algebra.vector import Vector3D
from pymat3d.core.exceptions import SingularMatrixError, ValidationError
from pymat3d.core.tolerances import (
    DEFAULT,
    SINGULAR_DETERMINANT,
    SingularityBand,
    ToleranceTier,
)
from pymat3d.core.validation import check_array, check_shape, is_real_scalar

SINGULAR_MESSAGE = "Determinant = 0. Cannot calculate the inverse."


@dataclass(frozen=True)
class Matrix3D:
    """
    Immutable 3x3 matrix made of three row vectors.

    Operators:
        A + B, A - B   row-wise sum and difference
        A * B, A @ B   matrix product (not commutative)
        A * v, A @ v   matrix-vector product, returns Vector3D
        A * s, s * A   scaling by a real scalar
        -A             negation

    Attributes:
        r1, r2, r3: Rows of the matrix
    """
    r1: Vector3D
    r2: Vector3D
    r3: Vector3D

    __array_ufunc__ = None

    def __post_init__(self) -> None:
        for name in ('r1', 'r2', 'r3'):
            row = getattr(self, name)
            if not isinstance(row, Vector3D):
                raise ValidationError(
                    f"{name}: expected Vector3D, got {type(row).__name__}"
                )

    # --- Construction ---

    @classmethod
    def constant(cls, value: float) -> Matrix3D:
        """Matrix with all nine entries equal to value."""
        row = Vector3D(value, value, value)
        return cls(row, row, row)

    @classmethod
    def identity(cls) -> Matrix3D:
        return cls(
            Vector3D(1.0, 0.0, 0.0),
            Vector3D(0.0, 1.0, 0.0),
            Vector3D(0.0, 0.0, 1.0),
        )

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix3D:
        """
        Build a matrix from a row-major array-like of shape (3, 3).

        Raises:
            ValidationError: If the input is not numeric
            DimensionError: If the input does not have shape (3, 3)
        """
        arr = check_array(array, "array")
        check_shape(arr, (3, 3), "array")
        return cls(*(Vector3D.from_array(row) for row in arr))

    def to_numpy(self) -> NDArray[np.float64]:
        """Return the entries as a row-major float64 array of shape (3, 3)."""
        return np.array([list(row) for row in self.rows], dtype=np.float64)

    @property
    def rows(self) -> tuple[Vector3D, Vector3D, Vector3D]:
        return (self.r1, self.r2, self.r3)

    @property
    def columns(self) -> tuple[Vector3D, Vector3D, Vector3D]:
        return self.transpose().rows

    # --- Arithmetic ---

    def __add__(self, other: Matrix3D) -> Matrix3D:
        if not isinstance(other, Matrix3D):
            return NotImplemented
        return Matrix3D(self.r1 + other.r1, self.r2 + other.r2, self.r3 + other.r3)

    def __sub__(self, other: Matrix3D) -> Matrix3D:
        if not isinstance(other, Matrix3D):
            return NotImplemented
        return Matrix3D(self.r1 - other.r1, self.r2 - other.r2, self.r3 - other.r3)

    def __neg__(self) -> Matrix3D:
        return self.scale(-1.0)

    def __mul__(self, other):
        if isinstance(other, Matrix3D):
            return self._matmul(other)
        if isinstance(other, Vector3D):
            return self._vecmul(other)
        if is_real_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if is_real_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, Matrix3D):
            return self._matmul(other)
        if isinstance(other, Vector3D):
            return self._vecmul(other)
        return NotImplemented

    def _matmul(self, other: Matrix3D) -> Matrix3D:
        # Entry [i][j] is row i of self dotted with column j of other
        c1, c2, c3 = other.columns
        return Matrix3D(*(Vector3D(row * c1, row * c2, row * c3) for row in self.rows))

    def _vecmul(self, v: Vector3D) -> Vector3D:
        return Vector3D(self.r1 * v, self.r2 * v, self.r3 * v)

    def scale(self, s: float) -> Matrix3D:
        return Matrix3D(self.r1 * s, self.r2 * s, self.r3 * s)

    def transpose(self) -> Matrix3D:
        return Matrix3D(
            Vector3D(self.r1.x, self.r2.x, self.r3.x),
            Vector3D(self.r1.y, self.r2.y, self.r3.y),
            Vector3D(self.r1.z, self.r2.z, self.r3.z),
        )

    # --- Determinant and inverse ---

    def determinant(self) -> float:
        """
        Determinant via the column expansion of the scalar triple product.

        With a, b, c the columns of the matrix:
            a.x*b.y*c.z + a.y*b.z*c.x + a.z*b.x*c.y
              - a.x*b.z*c.y - a.y*b.x*c.z - a.z*b.y*c.x
        """
        a, b, c = self.columns
        return (
            a.x * b.y * c.z + a.y * b.z * c.x + a.z * b.x * c.y
            - a.x * b.z * c.y
            - a.y * b.x * c.z
            - a.z * b.y * c.x
        )

    def inverse(self, band: SingularityBand = SINGULAR_DETERMINANT) -> Matrix3D:
        """
        Inverse by the adjugate (cofactor) method.

        With a, b, c the columns of the matrix, the rows of the inverse are
        (b x c) / det, (c x a) / det and (a x b) / det.

        Args:
            band: Determinant interval treated as zero. The default is the
                  half-open band [-1e-5, 1e-5).

        Returns:
            New Matrix3D holding the inverse

        Raises:
            SingularMatrixError: If band.contains(determinant) or the
                determinant is exactly zero

        A non-finite determinant is not an error: a RuntimeWarning is
        emitted and NaN/Inf propagate into the result.
        """
        det = self.determinant()
        # Exact zero is singular for every band
        if band.contains(det) or det == 0.0:
            raise SingularMatrixError(
                SINGULAR_MESSAGE,
                matrix_name=type(self).__name__,
                determinant=det,
                lower=band.lower,
                upper=band.upper,
            )
        if not math.isfinite(det):
            warnings.warn(
                f"Non-finite determinant ({det}); inverse may contain NaN or Inf",
                RuntimeWarning,
                stacklevel=2,
            )

        inv_det = 1.0 / det
        a, b, c = self.columns
        return Matrix3D(
            b.cross(c) * inv_det,
            c.cross(a) * inv_det,
            a.cross(b) * inv_det,
        )

    # --- Comparison and display ---

    def isclose(self, other: Matrix3D, tolerance: ToleranceTier = DEFAULT) -> bool:
        """Entry-wise approximate equality under the given tolerance tier."""
        return bool(np.allclose(
            self.to_numpy(), other.to_numpy(),
            rtol=tolerance.rtol, atol=tolerance.atol,
        ))

    def __str__(self) -> str:
        return "\n" + "".join(
            f"{row.x}  {row.y}  {row.z}\n" for row in self.rows
        )
