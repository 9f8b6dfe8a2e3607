"""
Engine configuration and shared engine plumbing.

Every engine module in sigstats.core.signal owns a .yaml descriptor next to
its .py file (name, version, minimum samples, outputs) and exposes
compute(y) -> Dict[str, float].
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import numpy as np
import yaml


@dataclass
class EngineConfig:
    """Engine descriptor loaded from <engine>.yaml."""
    name: str
    version: str
    min_samples: int
    outputs: List[str]
    metadata: Dict[str, Any] = field(default_factory=dict)

    def nan_result(self) -> Dict[str, float]:
        """Result returned when the engine cannot run."""
        return {name: np.nan for name in self.outputs}


def load_engine_config(config_path: Path) -> EngineConfig:
    """Load engine configuration from YAML file."""
    with open(config_path) as f:
        raw = yaml.safe_load(f)

    return EngineConfig(
        name=raw['engine'],
        version=str(raw.get('version', '1.0')),
        min_samples=int(raw.get('min_samples', 1)),
        outputs=list(raw.get('outputs', [])),
        metadata=raw.get('metadata', {}),
    )


def clean_signal(y) -> np.ndarray:
    """Flatten to 1D and drop NaN samples (floating dtypes only)."""
    y = np.asarray(y).flatten()
    if y.dtype.kind in "fc":
        y = y[~np.isnan(y)]
    return y
