"""
Rolling baseline statistics over a trailing window of samples.

Samples are chronological, oldest first. When fewer samples than the window
exist, every available sample is used; an empty sequence yields zeros.
"""

from __future__ import annotations

from math import sqrt
from numbers import Integral
from typing import List, Optional, Sequence

from src.core.exceptions import DataValidationError

from .schema import BaselineStats


def validate_window_size(window_size: int) -> None:
    if isinstance(window_size, bool) or not isinstance(window_size, Integral):
        raise DataValidationError(f"window_size must be an integer, got {window_size!r}")
    if window_size <= 0:
        raise DataValidationError(f"window_size must be positive, got {window_size}")


def trailing_window(samples: Sequence[float], window_size: int) -> List[float]:
    """Return the last window_size samples, or all of them if there are fewer."""
    validate_window_size(window_size)
    return [float(v) for v in samples[-window_size:]]


def _mean(window: Sequence[float]) -> float:
    if not window:
        return 0.0
    return sum(window) / len(window)


def _population_std(window: Sequence[float], mean: float) -> float:
    if not window:
        return 0.0
    variance = sum((v - mean) ** 2 for v in window) / len(window)
    return sqrt(variance)


def rolling_mean(samples: Sequence[float], window_size: int) -> float:
    """
    Arithmetic mean of the trailing window.

    Returns 0.0 for an empty sequence.
    """
    return _mean(trailing_window(samples, window_size))


def rolling_std_dev(
    samples: Sequence[float], window_size: int, mean: Optional[float] = None
) -> float:
    """
    Population standard deviation of the trailing window.

    A precomputed mean may be passed to skip recomputation; it must come from
    the same samples and window_size.
    """
    window = trailing_window(samples, window_size)
    if mean is None:
        mean = _mean(window)
    return _population_std(window, mean)


def compute_baseline(samples: Sequence[float], window_size: int) -> BaselineStats:
    window = trailing_window(samples, window_size)
    mean = _mean(window)
    return BaselineStats(mean=mean, std=_population_std(window, mean), count=len(window))
