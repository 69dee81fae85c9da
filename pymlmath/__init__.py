"""
PyMLMath: small dense linear algebra and descriptive statistics.

Immutable float64 Vector and Matrix value types with arithmetic operators,
norms, transpose and products, plus mean / variance / standard deviation
over vectors.

Submodules:
    linalg: Vector and Matrix
    descriptive: mean, variance, std_dev, describe
    core: exceptions, validation, result envelope, compute kernels
"""

__version__ = "0.1.0"

from pymlmath.core.exceptions import (
    PyMLMathError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)
from pymlmath.linalg import Vector, Matrix
from pymlmath.descriptive import mean, variance, std_dev, describe
from pymlmath import linalg
from pymlmath import descriptive

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "mean",
    "variance",
    "std_dev",
    "describe",
    "PyMLMathError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "linalg",
    "descriptive",
]
