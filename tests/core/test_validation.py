"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, non-numeric rejection
    - check_shape: exact shape matching
    - check_scalar: real-number acceptance and float conversion
    - is_real_scalar: the predicate shared by the operator dispatch
"""

import math

import numpy as np
import pytest

from pymat3d.core.exceptions import DimensionError, ValidationError
from pymat3d.core.validation import (
    check_array,
    check_scalar,
    check_shape,
    is_real_scalar,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "v")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        arr = np.array([1, 2, 3], dtype=np.int32)
        result = check_array(arr, "v")
        assert np.issubdtype(result.dtype, np.floating)

    def test_float_array_passthrough(self):
        arr = np.array([1.0, 2.0, 3.0], dtype=np.float64)
        result = check_array(arr, "v")
        assert result.dtype == np.float64

    def test_non_finite_allowed(self):
        result = check_array([np.nan, np.inf, 1.0], "v")
        assert np.isnan(result[0])
        assert np.isinf(result[1])

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="v"):
            check_array(["a", "b", "c"], "v")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError):
            check_array([1.0, "two", 3.0], "v")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="real"):
            check_array([1 + 2j, 0, 0], "v")


# ═══════════════════════════════════════════════════════════════════════
# check_shape
# ═══════════════════════════════════════════════════════════════════════


class TestCheckShape:

    def test_matching_shape(self):
        check_shape(np.zeros((3, 3)), (3, 3), "m")

    def test_wrong_length(self):
        with pytest.raises(DimensionError, match=r"expected shape \(3,\)"):
            check_shape(np.zeros(4), (3,), "v")

    def test_wrong_ndim(self):
        with pytest.raises(DimensionError, match="m"):
            check_shape(np.zeros(9), (3, 3), "m")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            check_shape(np.zeros((2, 3)), (3, 3), "m")


# ═══════════════════════════════════════════════════════════════════════
# check_scalar
# ═══════════════════════════════════════════════════════════════════════


class TestCheckScalar:

    def test_int_converted(self):
        result = check_scalar(2, "s")
        assert result == 2.0
        assert type(result) is float

    def test_numpy_scalars(self):
        assert type(check_scalar(np.float32(1.5), "s")) is float
        assert check_scalar(np.int64(7), "s") == 7.0

    def test_nan_passes_through(self):
        assert math.isnan(check_scalar(math.nan, "s"))

    def test_inf_passes_through(self):
        assert check_scalar(-math.inf, "s") == -math.inf

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="s: expected a real number"):
            check_scalar("1.0", "s")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_scalar(True, "s")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError):
            check_scalar(1 + 0j, "s")

    def test_none_rejected(self):
        with pytest.raises(ValidationError):
            check_scalar(None, "s")


# ═══════════════════════════════════════════════════════════════════════
# is_real_scalar
# ═══════════════════════════════════════════════════════════════════════


class TestIsRealScalar:

    def test_python_and_numpy_reals(self):
        assert is_real_scalar(1)
        assert is_real_scalar(2.5)
        assert is_real_scalar(np.float32(1.0))
        assert is_real_scalar(np.int64(3))

    def test_non_reals(self):
        assert not is_real_scalar(True)
        assert not is_real_scalar(1 + 0j)
        assert not is_real_scalar("1")
        assert not is_real_scalar(None)
