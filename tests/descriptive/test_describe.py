"""
Tests for describe() and DescriptiveSolution.

Cross-checked against scipy.stats.describe.
"""

import math

import numpy as np
import pytest
from scipy import stats as sp_stats

from pymlmath import Vector
from pymlmath.descriptive import DescriptiveSolution, describe


class TestDescribe:

    def test_scenario(self):
        """[1, 2, 3]: mean 2, sample variance 1, L1 norm 6."""
        result = describe(Vector([1.0, 2.0, 3.0]))
        assert isinstance(result, DescriptiveSolution)
        assert result.n == 3
        assert result.mean == 2.0
        assert result.variance == 1.0
        assert result.sd == 1.0
        assert result.minimum == 1.0
        assert result.maximum == 3.0
        assert result.norm_l1 == 6.0
        assert result.unbiased is True
        assert result.warnings == ()

    def test_population(self):
        result = describe([1.0, 2.0, 3.0], unbiased=False)
        np.testing.assert_allclose(result.variance, 2.0 / 3.0, rtol=1e-12)
        assert result.info['unbiased'] is False

    def test_matches_scipy(self, rng):
        """scipy.stats.describe reports the ddof=1 variance."""
        x = rng.standard_normal(500) * 3.0 - 1.0
        result = describe(x)
        ref = sp_stats.describe(x)
        assert result.n == ref.nobs
        np.testing.assert_allclose(result.mean, ref.mean, rtol=1e-12)
        np.testing.assert_allclose(result.variance, ref.variance, rtol=1e-12)
        assert (result.minimum, result.maximum) == tuple(ref.minmax)

    def test_norms_match_vector(self, rng):
        v = Vector(rng.standard_normal(20))
        result = describe(v)
        assert result.norm_l1 == v.norm_l1()
        assert result.norm_l2 == v.norm_l2()
        assert result.vector is v

    def test_empty(self):
        """Empty data gives zero moments and NaN extrema."""
        result = describe(Vector([]))
        assert result.n == 0
        assert result.mean == 0.0
        assert result.variance == 0.0
        assert math.isnan(result.minimum)
        assert math.isnan(result.maximum)

    def test_single_point_unbiased_warns(self):
        """describe() degrades to NaN where variance() raises."""
        with pytest.warns(RuntimeWarning, match="at least 2 observations"):
            result = describe(Vector([4.0]))
        assert math.isnan(result.variance)
        assert math.isnan(result.sd)
        assert result.mean == 4.0
        assert len(result.warnings) == 1

    def test_single_point_population(self):
        result = describe(Vector([4.0]), unbiased=False)
        assert result.variance == 0.0
        assert result.warnings == ()

    def test_non_finite_warns(self):
        with pytest.warns(RuntimeWarning, match="1 NaN, 0 Inf"):
            result = describe(Vector([1.0, float('nan'), 3.0]))
        assert math.isnan(result.mean)
        assert result._result.has_warning("non-finite")


class TestSolutionMetadata:

    def test_timing_sections(self):
        result = describe(Vector([1.0, 2.0, 3.0]))
        for key in ('total_seconds', 'mean', 'variance', 'extrema', 'norms'):
            assert key in result.timing

    def test_backend_and_provenance(self):
        result = describe(Vector([1.0, 2.0]))
        assert result.backend_name == 'cpu_descriptive'
        assert 'pymlmath_version' in result._result.provenance

    def test_summary_text(self):
        text = describe(Vector([1.0, 2.0, 3.0])).summary()
        assert text.startswith("Descriptive Statistics:")
        assert "Var (sample)" in text
        assert "2.000000" in text

    def test_summary_lists_warnings(self):
        with pytest.warns(RuntimeWarning):
            text = describe(Vector([1.0])).summary()
        assert "Warning:" in text

    def test_repr(self):
        """Floats are shown in %g form."""
        assert repr(describe(Vector([1.0, 2.0, 3.0]))) == (
            "DescriptiveSolution(n=3, mean=2, sd=1, unbiased=True)"
        )
