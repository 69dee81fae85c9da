"""
Sequential-accumulation product kernels.

Every reduction here sums strictly left to right, starting from 0.0, one
term at a time. np.sum and BLAS-backed np.dot/np.matmul use pairwise or
blocked summation, so their results can differ from a plain loop in the
last bits; these kernels reproduce the plain loop exactly.

Products vectorize over the output cells and loop only over the inner
dimension, so each output cell still sees its terms in order k = 0, 1, ...

All functions take validated float64 arrays. Shape checks belong to the
callers (Vector, Matrix) and have already happened by the time a kernel
runs.
"""

import numpy as np
from numpy.typing import NDArray


def sequential_sum(values: NDArray[np.float64]) -> float:
    """
    Left-to-right sum of a 1-D array.

    np.add.accumulate is a strict running sum (no pairwise blocking), so its
    last element equals ((v0 + v1) + v2) + ...; adding it to 0.0 turns a
    lone -0.0 into 0.0 as a loop starting from 0.0 would.
    """
    if values.size == 0:
        return 0.0
    return 0.0 + float(np.add.accumulate(values)[-1])


def dot_kernel(a: NDArray[np.float64], b: NDArray[np.float64]) -> float:
    """Σ a[i] * b[i], accumulated in index order."""
    return sequential_sum(a * b)


def matvec_kernel(
    a: NDArray[np.float64],
    rows: int,
    cols: int,
    x: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Row-major matrix times vector.

    Args:
        a: Flat row-major storage of length rows * cols
        rows, cols: Matrix shape
        x: Vector of length cols

    Returns:
        Array of length rows with out[r] = Σ_c a[r*cols + c] * x[c]
    """
    grid = a.reshape(rows, cols)
    out = np.zeros(rows, dtype=np.float64)
    for c in range(cols):
        out += grid[:, c] * x[c]
    return out


def matmul_kernel(
    a: NDArray[np.float64],
    a_rows: int,
    inner: int,
    b: NDArray[np.float64],
    b_cols: int,
) -> NDArray[np.float64]:
    """
    Row-major matrix product.

    Args:
        a: Flat storage of the a_rows x inner left operand
        b: Flat storage of the inner x b_cols right operand

    Returns:
        Flat row-major storage of the a_rows x b_cols product, where
        out[r*b_cols + c] = Σ_k a[r*inner + k] * b[k*b_cols + c]
    """
    left = a.reshape(a_rows, inner)
    right = b.reshape(inner, b_cols)
    out = np.zeros((a_rows, b_cols), dtype=np.float64)
    for k in range(inner):
        # outer product of column k of left and row k of right
        out += left[:, k, np.newaxis] * right[np.newaxis, k, :]
    return out.ravel()


def transpose_kernel(
    a: NDArray[np.float64],
    rows: int,
    cols: int,
) -> NDArray[np.float64]:
    """Flat storage of the cols x rows transpose: out[c*rows + r] = a[r*cols + c]."""
    # flatten always copies; ravel would return a view for 1 x n or n x 1
    return a.reshape(rows, cols).T.flatten()
