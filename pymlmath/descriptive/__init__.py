"""
Descriptive statistics module.

Public API:
    mean(x)              - Arithmetic mean (0.0 for empty input)
    variance(x)          - Sample (default) or population variance
    std_dev(x)           - Standard deviation
    describe(x)          - All statistics at once, with timing and warnings
"""

from pymlmath.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pymlmath.descriptive.solvers import (
    mean,
    variance,
    std_dev,
    describe,
)

__all__ = [
    "mean",
    "variance",
    "std_dev",
    "describe",
    "DescriptiveParams",
    "DescriptiveSolution",
]
