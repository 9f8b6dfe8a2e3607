"""
Absolute Median Engine
======================

Median of sample magnitudes |x_i|: a robust location of the signal envelope,
insensitive to sign and to a minority of outliers.

Two entry points:
    absolute_median(data)            works on a private copy, never mutates
    absolute_median_inplace(buffer)  reorders the caller's buffer in place,
                                     skipping the private copy of the data

Numpy buffers still take O(n) scratch space: the magnitudes, the partition
index and the gathered result before it is written back.

Selection is expected linear time (quickselect / introselect), not a sort.
"""

from typing import Dict

import numpy as np

from sigstats.core._numeric import as_samples, Samples
from sigstats.core._order import select_inplace
from sigstats.core.base import clean_signal
from sigstats.validation import require_non_empty

MIN_SAMPLES = 1


def _magnitude(x, samples: Samples):
    # Real values are widened first: abs of a fixed-width int wraps at its minimum
    if samples.is_complex:
        return samples.arith.real(abs(x))
    return abs(samples.arith.real(x))


def _middle(buffer, samples: Samples):
    """Select the middle rank(s) of buffer by magnitude and average them."""
    n = len(buffer)
    arith = samples.arith
    if n % 2 == 1:
        select_inplace(buffer, n // 2)
        return _magnitude(buffer[n // 2], samples)

    select_inplace(buffer, (n // 2 - 1, n // 2))
    lower = _magnitude(buffer[n // 2 - 1], samples)
    upper = _magnitude(buffer[n // 2], samples)
    return (lower + upper) / arith.real(2)


def absolute_median(data):
    """
    Median of |x_i| without touching the caller's data.

    Args:
        data: Real, complex or integer samples; any container or iterable

    Returns:
        Median magnitude in the working precision

    Raises:
        DomainError: if data is empty
    """
    samples = as_samples(data)
    require_non_empty(len(samples), "absolute median")
    buffer = samples.values.copy()
    return _middle(buffer, samples)


def absolute_median_inplace(buffer):
    """
    Median of |x_i|, reordering `buffer` in place instead of copying.

    Element order is not preserved: on return the middle-ranked elements sit
    at their sorted-by-magnitude positions.

    Args:
        buffer: list or writeable 1D numpy array

    Raises:
        DomainError: if buffer is empty
        TypeError: if buffer cannot be mutated in place
    """
    if isinstance(buffer, np.ndarray):
        if buffer.ndim != 1:
            raise TypeError("absolute_median_inplace needs a 1D array")
        if not buffer.flags.writeable:
            raise TypeError("absolute_median_inplace needs a writeable array")
    elif not isinstance(buffer, list):
        raise TypeError(
            f"absolute_median_inplace needs a list or numpy array, got {type(buffer).__name__}"
        )

    require_non_empty(len(buffer), "absolute median")
    samples = as_samples(buffer)
    return _middle(buffer, samples)


def compute(y: np.ndarray) -> Dict[str, float]:
    """
    Compute absolute median of signal.

    Args:
        y: Signal values

    Returns:
        dict with 'absolute_median' key
    """
    result = {'absolute_median': np.nan}

    y = clean_signal(y)
    if len(y) < MIN_SAMPLES:
        return result

    result['absolute_median'] = float(absolute_median(y))
    return result
