"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, rejection of bad data
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_non_negative_length / check_positive_size / check_positive_dims
    - check_same_shape / check_inner_dims: operand compatibility
    - check_min_samples: minimum sample count
    - check_index: bounds and negative-index normalization
    - check_scalar: real-number check
"""

import numpy as np
import pytest

from pymlmath.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ValidationError,
)
from pymlmath.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_index,
    check_inner_dims,
    check_min_samples,
    check_ndim,
    check_non_negative_length,
    check_positive_dims,
    check_positive_size,
    check_same_shape,
    check_scalar,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a float64 copy and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "data")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted_to_float64(self):
        arr = np.array([1.0, 2.0], dtype=np.float32)
        result = check_array(arr, "data")
        assert result.dtype == np.float64

    def test_result_is_a_copy(self):
        arr = np.array([1.0, 2.0, 3.0])
        result = check_array(arr, "data")
        arr[0] = 99.0
        assert result[0] == 1.0

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "data")
        assert result.shape == (2, 2)

    def test_empty_list(self):
        result = check_array([], "data")
        assert result.shape == (0,)

    def test_rejects_none(self):
        with pytest.raises(ValidationError, match="required"):
            check_array(None, "data")

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "data")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b", "c"], "data")

    def test_rejects_booleans(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([True, False], "data")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex dtype"):
            check_array([1 + 2j, 3.0], "data")

    def test_large_python_ints_become_floats(self):
        """Ints past the int64 range arrive as object dtype from numpy."""
        result = check_array([10**20, 1], "data")
        assert result.dtype == np.float64
        assert result.tolist() == [1e20, 1.0]

    def test_unsigned_overflow_nested(self):
        result = check_array([[2**64]], "data")
        assert result.shape == (1, 1)
        assert result[0, 0] == 2.0**64

    def test_rejects_int_beyond_float_range(self):
        with pytest.raises(ValidationError, match="too large"):
            check_array([10**400], "data")

    def test_large_int_mixed_with_none_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([10**20, None], "data")

    def test_rejects_ragged_rows(self):
        with pytest.raises(ValidationError):
            check_array([[1.0, 2.0], [3.0]], "rows")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_ndim / check_1d / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_1d_passes_ndim_1(self):
        check_ndim(np.array([1.0, 2.0]), 1, "data")

    def test_wrong_ndim_raises(self):
        with pytest.raises(DimensionError, match="expected 1D.*got 2D"):
            check_ndim(np.array([[1.0, 2.0]]), 1, "data")

    def test_error_includes_shape(self):
        with pytest.raises(DimensionError, match=r"shape \(3, 2\)"):
            check_ndim(np.ones((3, 2)), 1, "data")

    def test_check_1d_rejects_scalar(self):
        with pytest.raises(DimensionError):
            check_1d(np.array(5.0), "data")

    def test_check_2d_rejects_1d(self):
        with pytest.raises(DimensionError, match="rows"):
            check_2d(np.array([1.0, 2.0]), "rows")


# ═══════════════════════════════════════════════════════════════════════
# Sizes
# ═══════════════════════════════════════════════════════════════════════


class TestSizes:

    def test_non_negative_length_accepts_zero(self):
        assert check_non_negative_length(0, "n") == 0

    def test_non_negative_length_accepts_numpy_int(self):
        assert check_non_negative_length(np.int64(4), "n") == 4

    def test_negative_length_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            check_non_negative_length(-1, "n")

    def test_float_length_rejected(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_non_negative_length(2.5, "n")

    def test_positive_size(self):
        assert check_positive_size(3, "n") == 3

    @pytest.mark.parametrize("n", [0, -2])
    def test_non_positive_size_rejected(self, n):
        with pytest.raises(ValidationError, match="must be positive"):
            check_positive_size(n, "n")

    def test_positive_dims(self):
        assert check_positive_dims(2, 3) == (2, 3)

    @pytest.mark.parametrize("rows,cols", [(0, 3), (2, 0), (-1, 1), (0, 0)])
    def test_non_positive_dims_rejected(self, rows, cols):
        with pytest.raises(ValidationError, match="must be positive"):
            check_positive_dims(rows, cols)


# ═══════════════════════════════════════════════════════════════════════
# Operand compatibility
# ═══════════════════════════════════════════════════════════════════════


class TestShapes:

    def test_same_shape_passes(self):
        check_same_shape((2, 3), (2, 3), "add")

    def test_different_shape_raises_with_attributes(self):
        with pytest.raises(DimensionError, match="add") as exc_info:
            check_same_shape((2, 3), (3, 2), "add")
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (3, 2)
        assert exc_info.value.operation == "add"

    def test_inner_dims_pass(self):
        check_inner_dims((2, 3), (3, 2), "matmul")
        check_inner_dims((2, 3), (3,), "matvec")

    def test_inner_dims_mismatch(self):
        with pytest.raises(DimensionError, match=r"3 != 2"):
            check_inner_dims((2, 3), (2, 3), "matmul")


class TestCheckMinSamples:

    def test_exact_minimum_passes(self):
        check_min_samples(2, 2, "sample variance")

    def test_insufficient_raises(self):
        with pytest.raises(ValidationError, match="at least 2 samples, got 1"):
            check_min_samples(1, 2, "sample variance")


# ═══════════════════════════════════════════════════════════════════════
# check_index / check_scalar
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_in_range(self):
        assert check_index(2, 3, "i") == 2

    def test_negative_normalized(self):
        assert check_index(-1, 3, "i") == 2
        assert check_index(-3, 3, "i") == 0

    @pytest.mark.parametrize("i", [3, 10, -4])
    def test_out_of_range(self, i):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            check_index(i, 3, "i")
        assert exc_info.value.index == i
        assert exc_info.value.bound == 3

    def test_empty_bound(self):
        with pytest.raises(IndexOutOfRangeError):
            check_index(0, 0, "i")

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_index(1.0, 3, "i")


class TestCheckScalar:

    @pytest.mark.parametrize("value", [2, 2.5, np.float64(2.5), np.int32(3)])
    def test_real_numbers_pass(self, value):
        assert check_scalar(value, "s") == float(value)

    @pytest.mark.parametrize("value", ["2", None, True, 1 + 1j])
    def test_non_real_rejected(self, value):
        with pytest.raises(ValidationError, match="expected a real number"):
            check_scalar(value, "s")
