"""
Validation Module

Precondition checks shared by every estimator.

Exports:
    - DomainError: Raised when an estimator is undefined for its input
    - require_non_empty: Reject empty input
    - require_min_samples: Reject inputs below a minimum length
    - require_same_length: Reject mismatched paired sequences
    - require_positive: Reject non-positive shape parameters
"""

from .preconditions import (
    DomainError,
    require_non_empty,
    require_min_samples,
    require_same_length,
    require_positive,
)

__all__ = [
    'DomainError',
    'require_non_empty',
    'require_min_samples',
    'require_same_length',
    'require_positive',
]
