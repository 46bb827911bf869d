"""
Three-component vector value type.

Vector3D is the leaf of the algebra package: Matrix3D rows are Vector3D
values and every matrix operation is written in terms of the dot and
cross products defined here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymat3d.core.tolerances import DEFAULT, ToleranceTier
from pymat3d.core.exceptions import ValidationError
from pymat3d.core.validation import (
    check_array,
    check_scalar,
    check_shape,
    is_real_scalar,
)


def _check_vector(value, name: str) -> None:
    if not isinstance(value, Vector3D):
        raise ValidationError(
            f"{name}: expected Vector3D, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class Vector3D:
    """
    Immutable 3D vector.

    Operators:
        a + b, a - b   component-wise sum and difference
        a * b          dot product (float) when b is a Vector3D
        a * s, s * a   scaling by a real scalar
        -a             negation

    Fields are stored as Python floats. NaN and Inf are accepted and
    propagate through arithmetic per IEEE rules.
    """
    x: float
    y: float
    z: float

    # Make NumPy scalars on the left defer to __rmul__
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        for name in ('x', 'y', 'z'):
            object.__setattr__(self, name, check_scalar(getattr(self, name), name))

    @classmethod
    def from_array(cls, array: ArrayLike) -> Vector3D:
        """
        Build a vector from any array-like of shape (3,).

        Raises:
            ValidationError: If the input is not numeric
            DimensionError: If the input does not have shape (3,)
        """
        arr = check_array(array, "array")
        check_shape(arr, (3,), "array")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_numpy(self) -> NDArray[np.float64]:
        """Return the components as a float64 array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3D:
        return self.scale(-1.0)

    def __mul__(self, other):
        if isinstance(other, Vector3D):
            return self.dot(other)
        if is_real_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if is_real_scalar(other):
            return self.scale(other)
        return NotImplemented

    def dot(self, other: Vector3D) -> float:
        _check_vector(other, "other")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def scale(self, s: float) -> Vector3D:
        return Vector3D(self.x * s, self.y * s, self.z * s)

    def cross(self, other: Vector3D) -> Vector3D:
        """Right-handed cross product self x other."""
        _check_vector(other, "other")
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def isclose(self, other: Vector3D, tolerance: ToleranceTier = DEFAULT) -> bool:
        """Component-wise approximate equality under the given tolerance tier."""
        return bool(np.allclose(
            self.to_numpy(), other.to_numpy(),
            rtol=tolerance.rtol, atol=tolerance.atol,
        ))
