"""
Configuration management.

    get_settings()      Cached settings (SIGSTATS_CONFIG or packaged defaults)
    load_settings(path) Read settings from a YAML file
    configure(settings) Install an explicit settings object
    reset_settings()    Drop the cached settings
"""

from .schema import EstimatorSettings, M2M4Settings
from .loader import configure, get_settings, load_settings, reset_settings

__all__ = [
    'EstimatorSettings',
    'M2M4Settings',
    'configure',
    'get_settings',
    'load_settings',
    'reset_settings',
]
