"""
Estimator Preconditions

Checks every estimator runs before touching its samples.

PRINCIPLE: violated preconditions raise immediately. Degenerate but
well-typed inputs (zero noise power, all-zero signals) are not errors;
they surface as NaN/inf of the working type.
"""


class DomainError(ValueError):
    """Raised when an estimator is undefined for the given input."""


def require_non_empty(n: int, what: str) -> None:
    """Reject empty input."""
    if n == 0:
        raise DomainError(f"{what} is undefined for empty input")


def require_min_samples(n: int, minimum: int, what: str) -> None:
    """Reject inputs shorter than `minimum`."""
    if n < minimum:
        raise DomainError(f"{what} requires at least {minimum} samples, got {n}")


def require_same_length(n_a: int, n_b: int, what: str) -> None:
    """Reject paired sequences of different lengths."""
    if n_a != n_b:
        raise DomainError(
            f"{what} requires sequences of equal length, got {n_a} and {n_b}"
        )


def require_positive(value, name: str) -> None:
    """Reject non-positive shape parameters."""
    if not value > 0:
        raise DomainError(f"{name} must be positive, got {value}")
