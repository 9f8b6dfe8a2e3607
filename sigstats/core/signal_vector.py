"""
Signal Vector
=============

Runs the engine set over every signal in a long-format observations table
and returns one feature row per signal.

Input columns:
    signal_id   signal identifier
    value       sample value
    I           sample index (optional; rows are ordered by it when present)

Output: one row per signal_id with every engine output as a Float64 column.
"""

import logging
from typing import Dict, List, Optional

import numpy as np
import polars as pl

from .registry import compute_features

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ('signal_id', 'value')


def get_signal_data(observations: pl.DataFrame, signal_id: str) -> np.ndarray:
    """
    Extract one signal's values, ordered by I when that column exists.

    Args:
        observations: Observations DataFrame
        signal_id: Signal identifier

    Returns:
        numpy array of signal values
    """
    signal_data = observations.filter(pl.col('signal_id') == signal_id)
    if 'I' in observations.columns:
        signal_data = signal_data.sort('I')
    return signal_data['value'].to_numpy()


def compute_signal_vector(
    observations: pl.DataFrame,
    engines: Optional[List[str]] = None,
) -> pl.DataFrame:
    """
    Compute features for every signal in an observations table.

    Args:
        observations: DataFrame with signal_id, value (and optionally I)
        engines: Engine names passed to compute_features()

    Returns:
        DataFrame with a signal_id column and one column per engine output

    Raises:
        ValueError: if a required column is missing
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in observations.columns]
    if missing:
        raise ValueError(f"observations missing required columns: {missing}")

    signal_ids = observations['signal_id'].unique(maintain_order=True).to_list()
    if not signal_ids:
        return pl.DataFrame()

    rows: List[Dict[str, object]] = []
    for signal_id in signal_ids:
        y = get_signal_data(observations, signal_id)
        features = compute_features(y, engines)
        rows.append({'signal_id': signal_id, **features})

    logger.info(f"Computed features for {len(rows)} signals")

    df = pl.DataFrame(rows, infer_schema_length=None)
    float_cols = [c for c in df.columns if c != 'signal_id']
    return df.with_columns([pl.col(c).cast(pl.Float64) for c in float_cols])
