"""
Shannon Entropy Engine
======================

Information measures over sample magnitudes, treating each magnitude as an
unnormalized probability-like weight.

Outputs:
    shannon_entropy - H = -sum(m_i * ln m_i)
    shannon_cost    - C = -sum(m_i^2 * ln m_i^2), the energy-based
                      (Coifman-Wickerhauser) cost used in best-basis search

Zero magnitudes contribute nothing (0 * ln 0 = 0). No normalization is
applied: divide by sum(m_i) (entropy) or sum(m_i^2) (cost) first for a
true probability entropy. For n samples of value v, H = n * v * (-ln v).

References:
    Coifman & Wickerhauser (1992) "Entropy-based algorithms for best basis selection"
"""

from typing import Dict

import numpy as np

from sigstats.core._numeric import as_samples
from sigstats.core.base import clean_signal

MIN_SAMPLES = 1


def _weighted_log(weights: np.ndarray, samples):
    w = weights[weights != 0]
    if len(w) == 0:
        return samples.arith.real(0)
    return -samples.total(w * samples.arith.log(w))


def shannon_entropy(data):
    """
    Shannon entropy -sum(m_i ln m_i) of |x_i|.

    Args:
        data: Real, complex or integer samples; any container or iterable

    Returns:
        Entropy in nats, working precision. Empty input gives 0.
    """
    samples = as_samples(data)
    return samples.arith.real(_weighted_log(samples.magnitudes(), samples))


def shannon_cost(data):
    """Coifman-Wickerhauser cost -sum(|x_i|^2 ln |x_i|^2)."""
    samples = as_samples(data)
    m = samples.magnitudes()
    return samples.arith.real(_weighted_log(m * m, samples))


def compute(y: np.ndarray) -> Dict[str, float]:
    """
    Compute entropy measures of signal magnitudes.

    Args:
        y: Signal values

    Returns:
        dict with shannon_entropy, shannon_cost
    """
    result = {
        'shannon_entropy': np.nan,
        'shannon_cost': np.nan,
    }

    y = clean_signal(y)
    if len(y) < MIN_SAMPLES:
        return result

    result['shannon_entropy'] = float(shannon_entropy(y))
    result['shannon_cost'] = float(shannon_cost(y))
    return result
