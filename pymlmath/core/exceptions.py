"""
Exception hierarchy for PyMLMath.

All exceptions inherit from PyMLMathError to allow catching any
library-specific error. Every error is raised before computation starts,
so a failed call never returns a partial result.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMLMathError(Exception):
    """Base exception for all PyMLMath errors."""
    pass


class ValidationError(PyMLMathError):
    """
    Input validation failed.

    Raised for bad constructor dimensions, negative lengths, missing or
    non-numeric raw data, and insufficient sample sizes.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand shapes are incompatible.

    Raised when an elementwise operation receives operands of different
    shapes, or when the inner dimensions of a product disagree.

    Attributes:
        left_shape: Shape of the left operand, if known
        right_shape: Shape of the right operand, if known
        operation: Name of the operation that was attempted
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation


class IndexOutOfRangeError(PyMLMathError, IndexError):
    """
    Accessor index is beyond the bounds of the value.

    Also an IndexError, so sequence iteration and ``except IndexError``
    behave as they do for builtin sequences.

    Attributes:
        index: The offending index as passed by the caller
        bound: Size of the indexed axis
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
