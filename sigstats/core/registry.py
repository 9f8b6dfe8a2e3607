"""
Engine Registry - discovers and loads all available engines.

The registry provides:
1. Auto-discovery of engines with .yaml descriptors
2. Lazy loading of engine compute functions
3. compute_features(): run a set of engines over one signal
"""

import importlib
import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional

import numpy as np

from sigstats.config import get_settings
from .base import EngineConfig, clean_signal, load_engine_config

logger = logging.getLogger(__name__)


class EngineRegistry:
    """
    Registry of available engines.

    Discovers engines by scanning for .yaml descriptors in the engines directory.
    Provides lazy loading of engine compute functions.
    """

    def __init__(self, engines_dir: Optional[Path] = None, package: str = "sigstats.core.signal"):
        if engines_dir is None:
            engines_dir = Path(__file__).parent / "signal"

        self.engines_dir = engines_dir
        self.package = package
        self._configs: Dict[str, EngineConfig] = {}
        self._compute_funcs: Dict[str, Callable] = {}

        self._discover_engines()

    def _discover_engines(self):
        """Find all engines with .yaml descriptors."""
        for config_path in sorted(self.engines_dir.glob("*.yaml")):
            engine_name = config_path.stem
            if engine_name.startswith("_"):
                continue

            try:
                self._configs[engine_name] = load_engine_config(config_path)
            except Exception as e:
                logger.warning(f"Failed to load config for {engine_name}: {e}")

        logger.debug(f"Discovered engines: {', '.join(self.list_engines())}")

    def list_engines(self) -> List[str]:
        """List all available engine names."""
        return sorted(self._configs.keys())

    def has_engine(self, engine_name: str) -> bool:
        """Check if engine exists in registry."""
        return engine_name in self._configs

    def get_config(self, engine_name: str) -> EngineConfig:
        """Get configuration for an engine."""
        if engine_name not in self._configs:
            available = ", ".join(self.list_engines())
            raise KeyError(
                f"Unknown engine: '{engine_name}'. Available: {available}"
            )
        return self._configs[engine_name]

    def get_compute_func(self, engine_name: str) -> Callable:
        """
        Get compute function for an engine.

        Lazily imports the engine module on first access.
        """
        self.get_config(engine_name)
        if engine_name not in self._compute_funcs:
            try:
                module = importlib.import_module(f"{self.package}.{engine_name}")
                self._compute_funcs[engine_name] = module.compute
            except (ImportError, AttributeError) as e:
                raise ImportError(
                    f"Could not load compute function for '{engine_name}': {e}"
                )

        return self._compute_funcs[engine_name]

    def get_min_samples(self, engine_name: str) -> int:
        """Get minimum samples required for an engine."""
        return self.get_config(engine_name).min_samples

    def get_outputs(self, engine_name: str) -> List[str]:
        """Get outputs for a specific engine."""
        return self.get_config(engine_name).outputs

    def get_all_outputs(self) -> Dict[str, List[str]]:
        """Get outputs for all engines."""
        return {name: config.outputs for name, config in self._configs.items()}


# Global registry instance (lazy initialized)
_registry: Optional[EngineRegistry] = None


def get_registry() -> EngineRegistry:
    """Get or create global engine registry."""
    global _registry
    if _registry is None:
        _registry = EngineRegistry()
    return _registry


def reset_registry():
    """Reset the global registry (for testing)."""
    global _registry
    _registry = None


def compute_features(y: np.ndarray, engines: Optional[List[str]] = None) -> Dict[str, float]:
    """
    Run engines over one signal and merge their outputs.

    Args:
        y: Signal values
        engines: Engine names. None uses settings.engines, or every
            discovered engine when that is empty.

    Returns:
        Dict mapping output names to values. Engines whose minimum sample
        count is not met contribute NaN outputs.

    Raises:
        KeyError: if an engine name is unknown
    """
    registry = get_registry()
    if engines is None:
        engines = get_settings().engines or registry.list_engines()

    y = clean_signal(y)
    features: Dict[str, float] = {}
    for name in engines:
        config = registry.get_config(name)
        if len(y) < config.min_samples:
            logger.debug(f"{name} skipped: insufficient_data (n={len(y)}, need {config.min_samples})")
            features.update(config.nan_result())
            continue
        features.update(registry.get_compute_func(name)(y))
    return features
