"""
Tests for the Gini coefficient engine.
"""

from decimal import Decimal

import mpmath
import numpy as np
import pytest

from sigstats import DomainError, absolute_gini_coefficient, sample_absolute_gini_coefficient
from sigstats.core.signal.gini import compute


class TestAbsoluteGini:
    """Population Gini coefficient of magnitudes."""

    def test_one_hot(self):
        """Single nonzero sample reaches (n - 1) / n."""
        assert absolute_gini_coefficient([-1, 0, 0]) == pytest.approx(2 / 3, rel=1e-14)

        v = np.zeros(10)
        v[7] = -4.0
        assert absolute_gini_coefficient(v) == pytest.approx(0.9, rel=1e-14)

    def test_equal_magnitudes(self):
        """Constant magnitude is perfectly equal."""
        assert absolute_gini_coefficient([1.0, -1.0, 1.0, -1.0]) == 0

    def test_complex_ring(self):
        """Unit-modulus complex samples are equal too."""
        k = np.arange(32)
        v = np.exp(2j * np.pi * k / 32)
        assert absolute_gini_coefficient(v) == pytest.approx(0.0, abs=1e-12)

    def test_clone_invariance(self):
        """G(v ++ v) == G(v)."""
        np.random.seed(42)
        v = np.random.randn(57)
        g = absolute_gini_coefficient(v)
        assert absolute_gini_coefficient(np.concatenate([v, v])) == pytest.approx(g, rel=1e-12)

    def test_order_and_sign_invariance(self):
        """Depends only on the multiset of magnitudes."""
        np.random.seed(7)
        v = np.random.randn(40)
        g = absolute_gini_coefficient(v)
        assert absolute_gini_coefficient(-v[::-1]) == pytest.approx(g, rel=1e-12)

    def test_all_zero(self):
        """All-zero signal has no inequality."""
        assert absolute_gini_coefficient(np.zeros(8)) == 0

    def test_single_sample(self):
        """One sample is always perfectly equal."""
        assert absolute_gini_coefficient([3.0]) == 0

    def test_bounds(self):
        """0 <= G <= (n - 1) / n for random data."""
        np.random.seed(0)
        for n in (2, 5, 100):
            g = absolute_gini_coefficient(np.random.standard_cauchy(n))
            assert 0 <= g <= (n - 1) / n + 1e-12

    def test_float32_precision(self):
        """Float32 input returns float32."""
        g = absolute_gini_coefficient(np.array([0, 0, 1], dtype=np.float32))
        assert isinstance(g, np.float32)

    def test_mpmath(self):
        """Multiprecision result."""
        g = absolute_gini_coefficient([mpmath.mpf(-1), mpmath.mpf(0), mpmath.mpf(0)])
        assert isinstance(g, mpmath.mpf)
        assert abs(g - mpmath.mpf(2) / 3) < mpmath.mpf(10) ** -14

    def test_decimal(self):
        """Decimal result."""
        g = absolute_gini_coefficient([Decimal(-1), Decimal(0), Decimal(0)])
        assert isinstance(g, Decimal)
        assert float(g) == pytest.approx(2 / 3, rel=1e-14)

    def test_empty_raises(self):
        """Empty input is a domain error."""
        with pytest.raises(DomainError):
            absolute_gini_coefficient([])


class TestSampleGini:
    """Bias-corrected coefficient."""

    def test_one_hot_reaches_one(self):
        """n / (n - 1) * G is 1 for a one-hot vector."""
        assert sample_absolute_gini_coefficient([-1, 0, 0]) == pytest.approx(1.0, rel=1e-14)

    def test_bias_corrected_pairing(self):
        """On a one-hot vector the two coefficients differ by n / (n - 1)."""
        v = [-1, 0, 0]
        assert absolute_gini_coefficient(v) == pytest.approx(2 / 3, rel=1e-14)
        assert sample_absolute_gini_coefficient(v) == pytest.approx(1.0, rel=1e-14)

    def test_equal_magnitudes(self):
        """Still 0 for constant magnitude."""
        assert sample_absolute_gini_coefficient([2.0, -2.0]) == 0

    def test_needs_two_samples(self):
        """Fewer than two samples is a domain error."""
        with pytest.raises(DomainError):
            sample_absolute_gini_coefficient([1.0])
        with pytest.raises(DomainError):
            sample_absolute_gini_coefficient([])


class TestEngine:
    """compute() entry point."""

    def test_compute(self):
        """Both outputs."""
        result = compute(np.array([-1.0, 0.0, 0.0, np.nan]))
        assert result['absolute_gini_coefficient'] == pytest.approx(2 / 3)
        assert result['sample_absolute_gini_coefficient'] == pytest.approx(1.0)

    def test_too_short(self):
        """Below min_samples returns NaN."""
        result = compute(np.array([1.0]))
        assert np.isnan(result['absolute_gini_coefficient'])
        assert np.isnan(result['sample_absolute_gini_coefficient'])
