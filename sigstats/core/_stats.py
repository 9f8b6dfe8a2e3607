"""Univariate statistics primitives over any sample container."""

from typing import Tuple

import numpy as np
from scipy.stats import kurtosis as _scipy_kurtosis

from sigstats.core._numeric import as_samples, Samples
from sigstats.validation import require_min_samples, require_non_empty


def _centered(samples: Samples) -> Tuple[object, np.ndarray]:
    mu = samples.mean()
    return mu, samples.values - mu


def mean(data):
    """Arithmetic mean. Complex input gives a complex mean."""
    samples = as_samples(data)
    require_non_empty(len(samples), "mean")
    return samples.mean()


def variance(data):
    """Population variance, E|x - mean|^2."""
    samples = as_samples(data)
    require_non_empty(len(samples), "variance")
    _, d = _centered(samples)
    power = np.abs(d) ** 2 if samples.native else np.array([abs(v) ** 2 for v in d], dtype=object)
    return samples.arith.real(samples.mean(power))


def sample_variance(data):
    """Unbiased (n - 1) variance."""
    samples = as_samples(data)
    n = len(samples)
    require_min_samples(n, 2, "sample variance")
    arith = samples.arith
    return arith.real(variance(samples.values) * arith.real(n) / arith.real(n - 1))


def central_moments(data) -> Tuple[object, object, object, object]:
    """
    First four moments about the mean.

    Args:
        data: Sample sequence

    Returns:
        (mean, m2, m3, m4). For complex samples m2, m3, m4 are absolute
        moments E|x - mean|^k.
    """
    samples = as_samples(data)
    require_non_empty(len(samples), "central moments")
    arith = samples.arith
    mu, d = _centered(samples)

    if samples.is_complex:
        a = np.abs(d) if samples.native else np.array([abs(v) for v in d], dtype=object)
        d2 = a * a
        d3 = d2 * a
    else:
        d2 = d * d
        d3 = d2 * d
    d4 = d2 * d2

    return (
        mu,
        arith.real(samples.mean(d2)),
        arith.real(samples.mean(d3)),
        arith.real(samples.mean(d4)),
    )


def kurtosis(data, fisher: bool = True):
    """Kurtosis m4 / m2^2. fisher=True (default) returns excess kurtosis."""
    samples = as_samples(data)
    require_non_empty(len(samples), "kurtosis")
    arith = samples.arith

    if samples.native and not samples.is_complex and samples.arith.dtype != np.longdouble:
        if np.ptp(samples.values) == 0:
            return arith.nan()
        return arith.real(_scipy_kurtosis(samples.values, fisher=fisher, bias=True))

    _, m2, _, m4 = central_moments(samples.values)
    k = arith.divide(m4, m2 * m2)
    return k - 3 if fisher else k
