"""
Input validation utilities for pymat3d.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Non-finite floats are valid values, never rejected
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymat3d.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_shape(
    array: NDArray[np.floating[Any]],
    shape: tuple[int, ...],
    name: str,
) -> None:
    """
    Verify array has exactly the given shape.

    Raises:
        DimensionError: If the shapes differ
    """
    if array.shape != shape:
        raise DimensionError(
            f"{name}: expected shape {shape}, got {array.shape}"
        )


def is_real_scalar(value: Any) -> bool:
    """True for Python and NumPy real numbers, excluding bool."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a real scalar and return it as a Python float.

    Python and NumPy real numbers are accepted; bool, complex, strings and
    everything else are rejected. NaN and Inf pass through unchanged.

    Raises:
        ValidationError: If value is not a real number
    """
    if not is_real_scalar(value):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    return float(value)
