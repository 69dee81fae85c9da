"""
Tolerance tiers for numerical comparison.

Float64 arithmetic on the CPU is the only compute path, so a single
reference tier covers it.

Used by Vector.allclose / Matrix.allclose and by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance pair for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str

    def isclose(self, actual: float, expected: float) -> bool:
        """|actual - expected| <= atol + rtol * |expected| (numpy convention)."""
        return abs(actual - expected) <= self.atol + self.rtol * abs(expected)


# Reference: double precision, matches a hand-computed value to ~machine precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision reference',
)
