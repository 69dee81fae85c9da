"""
Input validation utilities for PyMLMath.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymlmath.core.exceptions import (
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)


def _all_real(array: NDArray[Any]) -> bool:
    return all(
        isinstance(v, numbers.Real) and not isinstance(v, bool)
        for v in array.flat
    )


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    The result is always a fresh copy, never a view of the caller's buffer.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input is None or cannot be converted to a real
            numeric array
    """
    if array is None:
        raise ValidationError(f"{name}: data is required, got None")

    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object and _all_real(result):
        # Python ints beyond the int64/uint64 range
        try:
            result = result.astype(np.float64)
        except OverflowError as e:
            raise ValidationError(f"{name}: value too large for float64: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types, "
            f"ragged rows or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return result.astype(np.float64, copy=False)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def _as_int(value: Any, name: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from None


def check_non_negative_length(n: Any, name: str) -> int:
    """
    Verify a requested length is a non-negative integer.

    Returns:
        n as a Python int

    Raises:
        ValidationError: If n is not an integer or is negative
    """
    n = _as_int(n, name)
    if n < 0:
        raise ValidationError(f"{name}: length cannot be negative, got {n}")
    return n


def check_positive_size(n: Any, name: str) -> int:
    """
    Verify a square-matrix size is a positive integer.

    Raises:
        ValidationError: If n is not an integer or is <= 0
    """
    n = _as_int(n, name)
    if n <= 0:
        raise ValidationError(f"{name}: matrix size must be positive, got {n}")
    return n


def check_positive_dims(rows: Any, cols: Any) -> tuple[int, int]:
    """
    Verify matrix dimensions are positive integers.

    Returns:
        (rows, cols) as Python ints

    Raises:
        ValidationError: If either dimension is not an integer or is <= 0
    """
    rows = _as_int(rows, "rows")
    cols = _as_int(cols, "cols")
    if rows <= 0 or cols <= 0:
        raise ValidationError(
            f"Matrix dimensions must be positive, got rows={rows}, cols={cols}"
        )
    return rows, cols


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands of an elementwise operation have the same shape.

    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: operands must have the same shape, got {left} and {right}",
            left_shape=left,
            right_shape=right,
            operation=operation,
        )


def check_inner_dims(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify the inner dimensions of a product agree.

    The last axis of ``left`` must match the first axis of ``right``.

    Raises:
        DimensionError: If the inner dimensions differ
    """
    if left[-1] != right[0]:
        raise DimensionError(
            f"{operation}: inner dimensions must match, got {left} and {right} "
            f"({left[-1]} != {right[0]})",
            left_shape=left,
            right_shape=right,
            operation=operation,
        )


def check_min_samples(n: int, min_samples: int, name: str) -> None:
    """
    Verify there are at least the minimum number of samples.

    Raises:
        ValidationError: If n < min_samples
    """
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Validate a sequence index and normalize negative values.

    Negative indices count from the end, as for builtin sequences.

    Returns:
        The index as a non-negative int in [0, bound)

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is outside [-bound, bound)
    """
    i = _as_int(index, name)
    if i < -bound or i >= bound:
        raise IndexOutOfRangeError(
            f"{name}: index {i} out of range for size {bound}",
            index=i,
            bound=bound,
        )
    return i + bound if i < 0 else i


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a real number.

    Returns:
        value as a Python float

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return float(value)
