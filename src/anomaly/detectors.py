"""
Detectors for statistical deviations.

Implements explainable methods:
- Z-score against a rolling baseline
- Fixed sigma-band spike/slowdown predicates
"""

from __future__ import annotations

from typing import Sequence

from src.core.config import DEFAULT_WINDOW_SIZE

from .baselines import compute_baseline, validate_window_size

SPIKE_SIGMA = 3.0
SLOWDOWN_SIGMA = 2.0


def z_score(value: float, mean: float, std_dev: float) -> float:
    """
    Signed distance of value from mean in standard deviations.

    Returns 0.0 when std_dev is zero, so constant history never flags.
    """
    if std_dev == 0:
        return 0.0
    return (value - mean) / std_dev


def is_spike(
    current_value: float,
    historical_values: Sequence[float],
    window_size: int = DEFAULT_WINDOW_SIZE,
) -> bool:
    """True iff current_value > mean + 3*std over the trailing window."""
    validate_window_size(window_size)
    if len(historical_values) < 2:
        return False
    baseline = compute_baseline(historical_values, window_size)
    return current_value > baseline.mean + SPIKE_SIGMA * baseline.std


def is_slowdown(
    current_value: float,
    historical_values: Sequence[float],
    window_size: int = DEFAULT_WINDOW_SIZE,
) -> bool:
    """True iff mean + 2*std < current_value <= mean + 3*std."""
    validate_window_size(window_size)
    if len(historical_values) < 2:
        return False
    baseline = compute_baseline(historical_values, window_size)
    lower = baseline.mean + SLOWDOWN_SIGMA * baseline.std
    upper = baseline.mean + SPIKE_SIGMA * baseline.std
    return lower < current_value <= upper
