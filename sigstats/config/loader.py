"""
Settings Loader
===============

Load estimator settings from YAML.

Resolution order:
    1. Explicit path passed to load_settings()
    2. SIGSTATS_CONFIG environment variable
    3. Packaged defaults.yaml

Usage:
    from sigstats.config import get_settings

    settings = get_settings()
    settings.m2m4.min_reliable_samples
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml

from .schema import EstimatorSettings

logger = logging.getLogger(__name__)

ENV_VAR = 'SIGSTATS_CONFIG'
DEFAULTS_PATH = Path(__file__).parent / 'defaults.yaml'


def get_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Resolve which settings file to read."""
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")
        return path

    env_path = os.environ.get(ENV_VAR)
    if env_path:
        env_path = Path(env_path)
        if env_path.exists():
            return env_path
        logger.warning(f"{ENV_VAR}={env_path} does not exist, using packaged defaults")

    return DEFAULTS_PATH


def load_settings(path: Optional[Union[str, Path]] = None) -> EstimatorSettings:
    """
    Load settings from YAML.

    Args:
        path: Settings file. None resolves via SIGSTATS_CONFIG, then defaults.

    Returns:
        Validated EstimatorSettings. Keys missing from the file keep their
        schema defaults.
    """
    config_file = get_config_path(path)

    with open(config_file) as f:
        raw = yaml.safe_load(f) or {}

    logger.debug(f"Loaded estimator settings from {config_file}")
    return EstimatorSettings.model_validate(raw)


# Global settings instance (lazy initialized)
_settings: Optional[EstimatorSettings] = None


def get_settings() -> EstimatorSettings:
    """Get or load global settings."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def configure(settings: EstimatorSettings) -> None:
    """Install an explicit settings object."""
    global _settings
    _settings = settings


def reset_settings():
    """Reset the global settings (for testing)."""
    global _settings
    _settings = None
