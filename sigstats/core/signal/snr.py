"""
Oracle SNR
==========

Reference-based signal-to-noise ratio: the clean signal and the noise are
both known. Ground truth for validating blind estimators.

    oracle_snr                   sum|s_i|^2 / sum|w_i|^2
    mean_invariant_oracle_snr    same, with each sequence's mean removed first

Division follows IEEE semantics in every working precision: zero noise power
gives +inf (or NaN when the signal power is zero too). No clamping.
Empty sequences have zero power on both sides and give NaN.
"""

import numpy as np

from sigstats.core._numeric import as_samples, Samples
from sigstats.validation import require_same_length


def _power(samples: Samples, values: np.ndarray):
    """sum |v_i|^2 in the working precision."""
    if samples.native:
        if samples.is_complex:
            p = values.real * values.real + values.imag * values.imag
        else:
            p = values * values
        return samples.total(p.astype(samples.arith.dtype, copy=False))
    return samples.total(np.array([samples.arith.real(abs(v)) ** 2 for v in values], dtype=object))


def _paired(signal, noise, what: str):
    s = as_samples(signal)
    w = as_samples(noise)
    require_same_length(len(s), len(w), what)
    return s, w


def _centered(samples: Samples):
    if len(samples) == 0:
        return samples.values
    return samples.values - samples.mean()


def _ratio(s: Samples, s_values, w: Samples, w_values):
    arith = s.arith
    return arith.divide(_power(s, s_values), arith.real(_power(w, w_values)))


def _to_db(snr, samples: Samples):
    with np.errstate(divide='ignore', invalid='ignore'):
        return samples.arith.real(10 * samples.arith.log10(snr))


def oracle_snr(signal, noise):
    """
    Linear SNR from known signal and noise.

    Args:
        signal: Clean signal samples
        noise: Noise samples, same length

    Returns:
        sum|signal|^2 / sum|noise|^2 in the signal's working precision

    Raises:
        DomainError: if lengths differ
    """
    s, w = _paired(signal, noise, "oracle SNR")
    return _ratio(s, s.values, w, w.values)


def oracle_snr_db(signal, noise):
    """Oracle SNR in decibels, 10 * log10(oracle_snr)."""
    s, w = _paired(signal, noise, "oracle SNR")
    return _to_db(_ratio(s, s.values, w, w.values), s)


def mean_invariant_oracle_snr(signal, noise):
    """
    Oracle SNR with each sequence's mean removed (DC-offset invariant).

    Raises:
        DomainError: if lengths differ
    """
    s, w = _paired(signal, noise, "mean-invariant oracle SNR")
    return _ratio(s, _centered(s), w, _centered(w))


def mean_invariant_oracle_snr_db(signal, noise):
    """Mean-invariant oracle SNR in decibels."""
    s, w = _paired(signal, noise, "mean-invariant oracle SNR")
    return _to_db(_ratio(s, _centered(s), w, _centered(w)), s)
