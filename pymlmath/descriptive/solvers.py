"""
Descriptive statistics over a Vector.

Mathematical definitions:
    Mean:                     μ  = (1/n) Σ_i x_i
    Population variance:      σ² = (1/n) Σ_i (x_i − μ)²
    Sample (unbiased) variance: s² = (1/(n−1)) Σ_i (x_i − μ)²

Provides the scalar functions mean(), variance(), std_dev() and the
aggregate entry point describe(). Sums are accumulated left to right.
"""

from __future__ import annotations

import math
import warnings

import numpy as np
from numpy.typing import ArrayLike

from pymlmath.core.compute.linalg import sequential_sum
from pymlmath.core.compute.timing import Timer
from pymlmath.core.exceptions import ValidationError
from pymlmath.core.result import Result
from pymlmath.core.validation import check_min_samples
from pymlmath.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pymlmath.linalg.vector import Vector


def _ensure_vector(x: ArrayLike | Vector) -> Vector:
    """Convert raw 1-D array-like to Vector if needed."""
    if isinstance(x, Vector):
        return x
    return Vector(x)


def _check_unbiased(unbiased: bool) -> bool:
    if not isinstance(unbiased, (bool, np.bool_)):
        raise ValidationError(
            f"unbiased: expected a bool, got {type(unbiased).__name__}"
        )
    return bool(unbiased)


def mean(x: ArrayLike | Vector) -> float:
    """
    Arithmetic mean of the elements.

    Returns 0.0 for an empty vector.
    """
    x = _ensure_vector(x)
    if x.length == 0:
        return 0.0
    return sequential_sum(x.to_numpy()) / x.length


def variance(x: ArrayLike | Vector, unbiased: bool = True) -> float:
    """
    Variance of the elements.

    Parameters
    ----------
    x : Vector or 1-D array-like
    unbiased : bool
        True for the sample variance (divides by n-1), False for the
        population variance (divides by n).

    Returns
    -------
    float
        0.0 for an empty vector.

    Raises
    ------
    ValidationError
        If unbiased and the vector has exactly one element.
    """
    x = _ensure_vector(x)
    unbiased = _check_unbiased(unbiased)
    n = x.length
    if n == 0:
        return 0.0
    if unbiased:
        check_min_samples(n, 2, "sample variance")

    mu = mean(x)
    deviations = x.to_numpy() - mu
    sum_of_squares = sequential_sum(deviations * deviations)

    denominator = n - 1 if unbiased else n
    return sum_of_squares / denominator


def std_dev(x: ArrayLike | Vector, unbiased: bool = True) -> float:
    """Standard deviation, sqrt(variance(x, unbiased))."""
    return math.sqrt(variance(x, unbiased))


def describe(
    x: ArrayLike | Vector,
    *,
    unbiased: bool = True,
) -> DescriptiveSolution:
    """
    Compute all descriptive statistics of a vector at once.

    Computes: n, mean, variance, standard deviation, min, max, L1 and L2
    norms.

    Unlike variance(), describe() does not raise for a single observation
    with unbiased=True: variance and sd are NaN and a warning is recorded.
    Non-finite input values are allowed, propagate into the statistics,
    and are reported as a warning.

    Parameters
    ----------
    x : Vector or 1-D array-like
    unbiased : bool
        Sample (True) or population (False) variance.

    Returns
    -------
    DescriptiveSolution
    """
    vector = _ensure_vector(x)
    unbiased = _check_unbiased(unbiased)

    timer = Timer()
    timer.start()

    data = vector.to_numpy()
    n = vector.length
    warnings_list: list[str] = []

    with timer.section('validation'):
        if not np.all(np.isfinite(data)):
            n_nan = int(np.sum(np.isnan(data)))
            n_inf = int(np.sum(np.isinf(data)))
            warnings_list.append(
                f"data contains non-finite values ({n_nan} NaN, {n_inf} Inf); "
                f"statistics will be non-finite"
            )

    with timer.section('mean'):
        mu = mean(vector)

    with timer.section('variance'):
        if unbiased and n == 1:
            var = float('nan')
            warnings_list.append(
                "sample variance requires at least 2 observations, got 1; "
                "variance and sd are NaN"
            )
        else:
            var = variance(vector, unbiased)
        sd = math.sqrt(var)

    with timer.section('extrema'):
        minimum = float(np.min(data)) if n else float('nan')
        maximum = float(np.max(data)) if n else float('nan')

    with timer.section('norms'):
        norm_l1 = vector.norm_l1()
        norm_l2 = vector.norm_l2()

    timer.stop()

    for message in warnings_list:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    result = Result(
        params=DescriptiveParams(
            n=n,
            mean=mu,
            variance=var,
            sd=sd,
            minimum=minimum,
            maximum=maximum,
            norm_l1=norm_l1,
            norm_l2=norm_l2,
            unbiased=unbiased,
        ),
        info={'method': 'sequential_sum', 'unbiased': unbiased, 'n': n},
        timing=timer.result(),
        backend_name='cpu_descriptive',
        warnings=tuple(warnings_list),
    )
    return DescriptiveSolution(_result=result, _vector=vector)
