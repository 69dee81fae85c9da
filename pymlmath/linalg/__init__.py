"""
Dense linear algebra value types.

Public API:
    Vector  - immutable 1-D float64 vector (norms, dot, cosine similarity)
    Matrix  - immutable row-major float64 matrix (transpose, products)
"""

from pymlmath.linalg.vector import Vector
from pymlmath.linalg.matrix import Matrix

__all__ = [
    "Vector",
    "Matrix",
]
