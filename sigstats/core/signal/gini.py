"""
Gini Coefficient Engine
=======================

Inequality of the magnitude distribution, borrowed from economics:

    G = 2 * sum(i * m_i) / (n * sum(m_i)) - (n + 1) / n

with m_1 <= ... <= m_n the sorted magnitudes and i the 1-based rank.

Physics:
    - G -> 0: energy spread evenly across samples
    - G -> 1: energy concentrated in a single sample

G is invariant under cloning (G(v ++ v) == G(v)). Its maximum for n
samples is (n - 1) / n; the sample coefficient n / (n - 1) * G removes that
bias and reaches exactly 1 for a one-hot vector, at the cost of cloning
invariance.

Some libraries report the bias-corrected value under the name "absolute
Gini coefficient" (1 for a one-hot vector); here that is
sample_absolute_gini_coefficient.

References:
    Hurley & Rickard (2009) "Comparing Measures of Sparsity"
"""

from typing import Dict

import numpy as np

from sigstats.core._numeric import as_samples, Samples
from sigstats.core.base import clean_signal
from sigstats.validation import require_min_samples, require_non_empty

MIN_SAMPLES = 2


def _gini(samples: Samples):
    arith = samples.arith
    n = len(samples)
    m = np.sort(samples.magnitudes())

    denom = samples.total(m)
    # All-zero signal: every element is the same, so no inequality
    if denom == 0:
        return arith.real(0)

    ranks = np.arange(1, n + 1).astype(m.dtype)
    num = samples.total(ranks * m)
    two = arith.real(2)
    return arith.real(two * num / (arith.real(n) * denom) - arith.real(n + 1) / arith.real(n))


def absolute_gini_coefficient(data):
    """
    Gini coefficient of |x_i|.

    Args:
        data: Real, complex or integer samples; any container or iterable

    Returns:
        G in [0, (n - 1) / n]; 0 for an all-zero signal

    Raises:
        DomainError: if data is empty
    """
    samples = as_samples(data)
    require_non_empty(len(samples), "absolute Gini coefficient")
    return _gini(samples)


def sample_absolute_gini_coefficient(data):
    """
    Bias-corrected Gini coefficient n / (n - 1) * G, in [0, 1].

    Raises:
        DomainError: if data has fewer than two samples
    """
    samples = as_samples(data)
    n = len(samples)
    require_min_samples(n, 2, "sample absolute Gini coefficient")
    arith = samples.arith
    return arith.real(_gini(samples) * arith.real(n) / arith.real(n - 1))


def compute(y: np.ndarray) -> Dict[str, float]:
    """
    Compute Gini coefficients of signal magnitudes.

    Args:
        y: Signal values

    Returns:
        dict with absolute_gini_coefficient, sample_absolute_gini_coefficient
    """
    result = {
        'absolute_gini_coefficient': np.nan,
        'sample_absolute_gini_coefficient': np.nan,
    }

    y = clean_signal(y)
    if len(y) < MIN_SAMPLES:
        return result

    samples = as_samples(y)
    gini = _gini(samples)
    n = len(samples)
    result['absolute_gini_coefficient'] = float(gini)
    result['sample_absolute_gini_coefficient'] = float(gini) * n / (n - 1)
    return result
