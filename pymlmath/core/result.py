"""
Generic result container for aggregate PyMLMath computations.

The Result class provides a standardized envelope for computations that
produce more than a single scalar (e.g. describe()). It carries timing,
warnings and provenance next to the domain-specific parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata recorded with every result."""
    from pymlmath import __version__

    return {
        'pymlmath_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters
        info: Structured metadata (method, sample size, flags)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library and interpreter versions

    Examples:
        >>> Result(
        ...     params=DescriptiveParams(n=3, mean=2.0, ...),
        ...     info={'unbiased': True},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_descriptive'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
