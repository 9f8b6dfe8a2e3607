"""
sigstats: generic statistical estimators for one-dimensional signals.

Public API:
    from sigstats import absolute_median, hoyer_sparsity, m2m4_snr_estimator_db

Estimators:
    absolute_median, absolute_median_inplace     robust magnitude location
    absolute_gini_coefficient,
    sample_absolute_gini_coefficient             magnitude inequality
    hoyer_sparsity                               L1/L2 sparsity
    shannon_entropy, shannon_cost                information measures
    oracle_snr, oracle_snr_db,
    mean_invariant_oracle_snr,
    mean_invariant_oracle_snr_db                 reference-based SNR
    m2m4_snr_estimator, m2m4_snr_estimator_db    blind SNR

Inputs may be numpy arrays, sequences or single-pass iterables of real,
complex or integer samples, including mpmath and Decimal elements. Results
are real scalars in the working precision of the input.

Also:
    sigstats.stats      mean, variance, kurtosis, central moments
    sigstats.core       Engine registry, compute_features()
    sigstats.config     Settings (M2M4 priors, default engines)
"""

from sigstats.validation import DomainError
from sigstats.config import get_settings
from sigstats.core import compute_features, get_registry
from sigstats.core.signal.median import absolute_median, absolute_median_inplace
from sigstats.core.signal.gini import absolute_gini_coefficient, sample_absolute_gini_coefficient
from sigstats.core.signal.sparsity import hoyer_sparsity
from sigstats.core.signal.entropy import shannon_entropy, shannon_cost
from sigstats.core.signal.snr import (
    oracle_snr,
    oracle_snr_db,
    mean_invariant_oracle_snr,
    mean_invariant_oracle_snr_db,
)
from sigstats.core.signal.m2m4 import m2m4_snr_estimator, m2m4_snr_estimator_db

__version__ = "0.1.0"

__all__ = [
    'absolute_median',
    'absolute_median_inplace',
    'absolute_gini_coefficient',
    'sample_absolute_gini_coefficient',
    'hoyer_sparsity',
    'shannon_entropy',
    'shannon_cost',
    'oracle_snr',
    'oracle_snr_db',
    'mean_invariant_oracle_snr',
    'mean_invariant_oracle_snr_db',
    'm2m4_snr_estimator',
    'm2m4_snr_estimator_db',
    'DomainError',
    'compute_features',
    'get_registry',
    'get_settings',
]
