"""
Univariate statistics over any sample container.

    from sigstats.stats import mean, variance, kurtosis
"""

from sigstats.core._stats import (
    central_moments,
    kurtosis,
    mean,
    sample_variance,
    variance,
)

__all__ = [
    'mean',
    'variance',
    'sample_variance',
    'kurtosis',
    'central_moments',
]
