"""
Core infrastructure for PyMLMath.

Shared abstractions and utilities used by the linalg and descriptive
subpackages.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, precision, tolerances, product kernels
"""

from pymlmath.core.result import Result
from pymlmath.core.exceptions import (
    PyMLMathError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMLMathError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
]
