"""
Signal Engines.

Each engine computes ONE family of estimators over a single signal and
exposes compute(y) -> Dict[str, float]. Descriptors (.yaml) live alongside.
Oracle SNR needs a reference and is a library function, not an engine.
"""

from . import median      # absolute_median
from . import gini        # absolute_gini_coefficient, sample_absolute_gini_coefficient
from . import sparsity    # hoyer_sparsity
from . import entropy     # shannon_entropy, shannon_cost
from . import snr         # oracle_snr, mean_invariant_oracle_snr
from . import m2m4        # m2m4_snr_estimator

__all__ = [
    'median',
    'gini',
    'sparsity',
    'entropy',
    'snr',
    'm2m4',
]
