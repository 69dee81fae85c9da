"""
Shared compute infrastructure for PyMLMath.

Submodules:
    timing: Execution timing utilities
    precision: Numerical precision constants and utilities
    tolerances: Tolerance tiers for numerical comparison
    linalg: Sequential-accumulation product kernels
"""

from pymlmath.core.compute.timing import Timer
from pymlmath.core.compute.precision import DEFAULT_EPS
from pymlmath.core.compute.tolerances import ToleranceTier, CPU_FP64

__all__ = [
    # Timing
    "Timer",
    # Precision
    "DEFAULT_EPS",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
]
