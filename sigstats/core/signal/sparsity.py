"""
Hoyer Sparsity Engine
=====================

Normalized L1/L2 ratio of sample magnitudes:

    HS = (sqrt(n) - ||x||_1 / ||x||_2) / (sqrt(n) - 1)

Physics:
    - HS = 0: every sample carries the same magnitude
    - HS = 1: all energy sits in a single sample (one-hot)

Scale invariant. One pass over the magnitudes.

References:
    Hoyer (2004) "Non-negative Matrix Factorization with Sparseness Constraints"
"""

from typing import Dict

import numpy as np

from sigstats.core._numeric import as_samples
from sigstats.core.base import clean_signal
from sigstats.validation import require_non_empty

MIN_SAMPLES = 1


def hoyer_sparsity(data):
    """
    Hoyer sparsity of |x_i|.

    Args:
        data: Real, complex or integer samples; any container or iterable

    Returns:
        HS in [0, 1]. All-zero input gives 0; a single nonzero sample gives 1.

    Raises:
        DomainError: if data is empty
    """
    samples = as_samples(data)
    n = len(samples)
    require_non_empty(n, "Hoyer sparsity")
    arith = samples.arith

    m = samples.magnitudes()
    l1 = samples.total(m)
    l2 = arith.sqrt(samples.total(m * m))

    if l2 == 0:
        return arith.real(0)
    if n == 1:
        return arith.real(1)

    rootn = arith.sqrt(arith.real(n))
    one = arith.real(1)
    return arith.real((rootn - l1 / l2) / (rootn - one))


def compute(y: np.ndarray) -> Dict[str, float]:
    """
    Compute Hoyer sparsity of signal.

    Args:
        y: Signal values

    Returns:
        dict with 'hoyer_sparsity' key
    """
    result = {'hoyer_sparsity': np.nan}

    y = clean_signal(y)
    if len(y) < MIN_SAMPLES:
        return result

    result['hoyer_sparsity'] = float(hoyer_sparsity(y))
    return result
