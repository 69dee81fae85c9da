"""
Numerical precision constants and utilities.

Provides the epsilon guard used by the zero-magnitude fallbacks of
Vector.normalize and Vector.cosine_similarity.
"""

from pymlmath.core.exceptions import ValidationError


# Default guard below which a magnitude is treated as zero
DEFAULT_EPS: float = 1e-12


def is_negligible(value: float, eps: float = DEFAULT_EPS) -> bool:
    """
    True when |value| < eps.

    Raises:
        ValidationError: If eps is negative
    """
    if eps < 0:
        raise ValidationError(f"eps must be non-negative, got {eps}")
    return abs(value) < eps
