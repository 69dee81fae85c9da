"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper returned by
describe().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pymlmath.core.result import Result

if TYPE_CHECKING:
    from pymlmath.linalg.vector import Vector


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics of one vector.

    variance and sd are NaN when an unbiased estimate was requested for
    fewer than two observations. minimum and maximum are NaN for an empty
    vector.
    """
    n: int
    mean: float
    variance: float
    sd: float
    minimum: float
    maximum: float
    norm_l1: float
    norm_l2: float
    unbiased: bool


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _vector: 'Vector'

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def variance(self) -> float:
        """Sample (n-1) or population (n) variance, per ``unbiased``."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        """Standard deviation, sqrt(variance)."""
        return self._result.params.sd

    @property
    def minimum(self) -> float:
        return self._result.params.minimum

    @property
    def maximum(self) -> float:
        return self._result.params.maximum

    @property
    def norm_l1(self) -> float:
        return self._result.params.norm_l1

    @property
    def norm_l2(self) -> float:
        return self._result.params.norm_l2

    @property
    def unbiased(self) -> bool:
        return self._result.params.unbiased

    @property
    def vector(self) -> 'Vector':
        """The data the statistics were computed from."""
        return self._vector

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text summary table."""
        kind = "sample" if self.unbiased else "population"
        rows = [
            ("n", f"{self.n}"),
            ("Mean", f"{self.mean:.6f}"),
            (f"Var ({kind})", f"{self.variance:.6f}"),
            (f"SD ({kind})", f"{self.sd:.6f}"),
            ("Min.", f"{self.minimum:.6f}"),
            ("Max.", f"{self.maximum:.6f}"),
            ("L1 norm", f"{self.norm_l1:.6f}"),
            ("L2 norm", f"{self.norm_l2:.6f}"),
        ]
        label_width = max(len(label) for label, _ in rows)
        value_width = max(len(value) for _, value in rows)

        lines = ["Descriptive Statistics:"]
        for label, value in rows:
            lines.append(f"  {label.ljust(label_width)}  {value.rjust(value_width)}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DescriptiveSolution(n={self.n}, mean={self.mean:.6g}, "
            f"sd={self.sd:.6g}, unbiased={self.unbiased})"
        )
