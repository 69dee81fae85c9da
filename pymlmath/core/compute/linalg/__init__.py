"""
Linear algebra kernels for PyMLMath.

All functions follow these conventions:
    - Inputs are flat, row-major float64 arrays that were already validated
    - Outputs are fresh arrays, never views of the inputs
    - Reductions accumulate sequentially, left to right

Submodules:
    products: dot, matrix-vector and matrix-matrix products, transpose
"""

from pymlmath.core.compute.linalg.products import (
    sequential_sum,
    dot_kernel,
    matvec_kernel,
    matmul_kernel,
    transpose_kernel,
)

__all__ = [
    "sequential_sum",
    "dot_kernel",
    "matvec_kernel",
    "matmul_kernel",
    "transpose_kernel",
]
