"""
Estimator Settings Schema

Defaults that shape estimator behaviour without being part of any call
signature: M2M4 shape priors, the sample count below which M2M4 estimates
are flagged as unreliable, and the default engine set.

Usage:
    settings = EstimatorSettings.model_validate(yaml.safe_load(text))
    settings.m2m4.real_signal_kurtosis   # 1.5, sinusoid
"""

from pydantic import BaseModel, Field
from typing import List


class M2M4Settings(BaseModel):
    """Shape priors and numerical tolerances for the M2M4 estimator"""
    real_signal_kurtosis: float = Field(
        default=1.5, gt=0,
        description="Kurtosis assumed for real signals (1.5 = sinusoid)"
    )
    real_noise_kurtosis: float = Field(
        default=3.0, gt=0,
        description="Kurtosis assumed for real noise (3 = Gaussian)"
    )
    complex_signal_kurtosis: float = Field(
        default=1.0, gt=0,
        description="Kurtosis assumed for complex signals (1 = constant modulus)"
    )
    complex_noise_kurtosis: float = Field(
        default=2.0, gt=0,
        description="Kurtosis assumed for complex noise (2 = circular Gaussian)"
    )
    min_reliable_samples: int = Field(
        default=500, ge=0,
        description="Below this many samples a warning is logged"
    )
    discriminant_tolerance: float = Field(
        default=64.0, ge=0,
        description="Negative discriminants within this many epsilons are clamped to zero"
    )


class EstimatorSettings(BaseModel):
    """Library-wide settings"""
    m2m4: M2M4Settings = Field(default_factory=M2M4Settings)
    engines: List[str] = Field(
        default_factory=list,
        description="Engines run by compute_features() when none are named. Empty = all."
    )
