"""
Estimator Core
==============

    _numeric.py  - Working precision and materialization of sample containers
    _stats.py    - Univariate primitives (mean, variance, kurtosis, moments)
    _order.py    - In-place k-th order statistic selection
    base.py      - EngineConfig and shared engine plumbing
    registry.py  - EngineRegistry for discovery and loading
    signal_vector.py - Feature table over a polars observations table
    signal/      - Per-signal estimator engines, each with a .yaml descriptor
"""

from sigstats.core.registry import get_registry, reset_registry, EngineRegistry, compute_features
from sigstats.core.base import EngineConfig
from sigstats.core.signal_vector import compute_signal_vector

from sigstats.core import signal

__all__ = [
    'get_registry',
    'reset_registry',
    'EngineRegistry',
    'EngineConfig',
    'compute_features',
    'compute_signal_vector',
    'signal',
]
