"""
M2M4 Blind SNR Engine
=====================

Estimates SNR from the noisy mixture x = s + w alone, using its second and
fourth moments and assumed kurtoses of the signal (k_a) and noise (k_w).

Method:
    With S, N the signal and noise powers and x centered on its mean,

        M2 = E|x|^2 = S + N
        M4 = E|x|^4 = k_a S^2 + c S N + k_w N^2

    where c = 6 for real data and c = 4 for circular complex data.
    Eliminating N leaves a quadratic in S:

        (k_a + k_w - c) S^2 + (c - 2 k_w) M2 S + k_w M2^2 - M4 = 0

    and eliminating S gives the companion quadratic in N. A root is
    physically valid when both implied powers are positive; SNR = S / N.

Root selection:
    S-roots are tried from largest to smallest, then N-roots the same way.
    The first root giving S > 0 and N > 0 wins. No valid root -> NaN, which
    happens when the kurtosis priors do not match the data.

Defaults:
    real:    k_a = 1.5 (sinusoid),        k_w = 3 (Gaussian)
    complex: k_a = 1   (constant modulus), k_w = 2 (circular Gaussian)

Caveat: fourth moments converge slowly. Below a few hundred samples the
estimate is visibly noisy; a warning is logged, the estimate is still
returned.

References:
    Pauluzzi & Beaulieu (2000) "A comparison of SNR estimation techniques for the AWGN channel"
    Matzner (1993) "An SNR estimation algorithm for complex baseband signals using higher order statistics"
"""

import logging
from typing import Dict, List, Optional

import numpy as np

from sigstats.config import get_settings
from sigstats.core._numeric import Arithmetic, as_samples, Samples
from sigstats.core.base import clean_signal
from sigstats.validation import require_non_empty, require_positive

logger = logging.getLogger(__name__)

MIN_SAMPLES = 8


def quadratic_roots(a, b, c, arith: Arithmetic, tolerance) -> List:
    """
    Real roots of a x^2 + b x + c = 0, ascending.

    Uses q = -(b + sign(b) sqrt(disc)) / 2 so neither root suffers
    cancellation. A discriminant that is negative by less than
    tolerance * eps * (b^2 + |4ac|) is rounding noise and is clamped to zero.
    """
    zero = arith.real(0)
    two = arith.real(2)

    if a == 0:
        if b == 0:
            return []
        return [arith.real(-c / b)]

    four_ac = arith.real(4) * a * c
    disc = b * b - four_ac
    if disc < 0:
        slack = arith.real(tolerance) * arith.epsilon() * (b * b + abs(four_ac))
        if -disc > slack:
            return []
        logger.debug(f"Clamped discriminant {disc} to zero (slack {slack})")
        disc = zero

    root = arith.sqrt(disc)
    q = -(b + root) / two if b >= 0 else -(b - root) / two

    if q == 0:
        # b == 0 and c == 0: double root at the origin
        return [zero, zero]

    x0 = arith.real(q / a)
    x1 = arith.real(c / q)
    return sorted([x0, x1])


def _kurtosis_priors(samples: Samples, signal_kurtosis, noise_kurtosis):
    settings = get_settings().m2m4
    if samples.is_complex:
        ka = settings.complex_signal_kurtosis if signal_kurtosis is None else signal_kurtosis
        kw = settings.complex_noise_kurtosis if noise_kurtosis is None else noise_kurtosis
        cross = 4
    else:
        ka = settings.real_signal_kurtosis if signal_kurtosis is None else signal_kurtosis
        kw = settings.real_noise_kurtosis if noise_kurtosis is None else noise_kurtosis
        cross = 6
    require_positive(ka, "estimated signal kurtosis")
    require_positive(kw, "estimated noise kurtosis")
    return ka, kw, cross


def _moments(samples: Samples):
    """(M2, M4) of |x - mean|."""
    d = samples.values - samples.mean()
    if samples.native:
        if samples.is_complex:
            p = d.real * d.real + d.imag * d.imag
        else:
            p = d * d
        p = p.astype(samples.arith.dtype, copy=False)
    else:
        p = np.array([samples.arith.real(abs(v)) ** 2 for v in d], dtype=object)
    return samples.arith.real(samples.mean(p)), samples.arith.real(samples.mean(p * p))


def m2m4_snr_estimator(data, signal_kurtosis=None, noise_kurtosis=None):
    """
    Blind SNR estimate from the mixture alone.

    Args:
        data: Noisy samples x = s + w (real or complex)
        signal_kurtosis: Assumed kurtosis of the signal. None uses the
            configured default (1.5 real sinusoid, 1 complex constant modulus)
        noise_kurtosis: Assumed kurtosis of the noise. None uses the
            configured default (3 real Gaussian, 2 complex Gaussian)

    Returns:
        Linear SNR in the working precision. +inf for a constant input, NaN
        when no root of the moment equations gives positive powers.

    Raises:
        DomainError: if data is empty or a kurtosis is not positive
    """
    samples = as_samples(data)
    n = len(samples)
    require_non_empty(n, "M2M4 SNR estimate")
    ka, kw, cross = _kurtosis_priors(samples, signal_kurtosis, noise_kurtosis)

    settings = get_settings().m2m4
    if n < settings.min_reliable_samples:
        logger.warning(
            f"M2M4 estimate from {n} samples is unreliable "
            f"(want at least {settings.min_reliable_samples})"
        )

    arith = samples.arith
    m2, m4 = _moments(samples)
    if m4 == 0:
        # Constant signal: no noise
        return arith.inf()

    ka = arith.real(ka)
    kw = arith.real(kw)
    cross = arith.real(cross)
    two = arith.real(2)
    a = ka + kw - cross

    logger.debug(f"M2M4: n={n} M2={m2} M4={m4} k_a={ka} k_w={kw}")

    s_roots = quadratic_roots(
        a, (cross - two * kw) * m2, kw * m2 * m2 - m4, arith, settings.discriminant_tolerance
    )
    for s in reversed(s_roots):
        noise = m2 - s
        if s > 0 and noise > 0:
            logger.debug(f"M2M4: signal power root S={s}")
            return arith.real(s / noise)

    n_roots = quadratic_roots(
        a, (cross - two * ka) * m2, ka * m2 * m2 - m4, arith, settings.discriminant_tolerance
    )
    for noise in reversed(n_roots):
        s = m2 - noise
        if noise > 0 and s > 0:
            logger.debug(f"M2M4: noise power root N={noise}")
            return arith.real(s / noise)

    logger.debug(f"M2M4: no physically valid root (S roots {s_roots}, N roots {n_roots})")
    return arith.nan()


def m2m4_snr_estimator_db(data, signal_kurtosis=None, noise_kurtosis=None):
    """Blind M2M4 SNR estimate in decibels."""
    samples = as_samples(data)
    snr = m2m4_snr_estimator(samples.values, signal_kurtosis, noise_kurtosis)
    with np.errstate(divide='ignore', invalid='ignore'):
        return samples.arith.real(10 * samples.arith.log10(snr))


def compute(
    y: np.ndarray,
    signal_kurtosis: Optional[float] = None,
    noise_kurtosis: Optional[float] = None,
) -> Dict[str, float]:
    """
    Compute blind M2M4 SNR of signal.

    Args:
        y: Signal values (signal plus noise)
        signal_kurtosis: Assumed signal kurtosis (None = configured default)
        noise_kurtosis: Assumed noise kurtosis (None = configured default)

    Returns:
        dict with m2m4_snr, m2m4_snr_db
    """
    result = {
        'm2m4_snr': np.nan,
        'm2m4_snr_db': np.nan,
    }

    y = clean_signal(y)
    if len(y) < MIN_SAMPLES:
        return result

    snr = float(m2m4_snr_estimator(y, signal_kurtosis, noise_kurtosis))
    result['m2m4_snr'] = snr
    with np.errstate(divide='ignore', invalid='ignore'):
        result['m2m4_snr_db'] = float(10 * np.log10(snr))
    return result
