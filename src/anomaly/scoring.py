"""
Scoring for detected deviations.

Normalizes z-score magnitude onto a fixed 0-100 scale so services with
different thresholds share one severity scale.
"""

from __future__ import annotations

from math import isnan

MAX_SCORE = 100.0


def anomaly_score(zscore: float, threshold: float) -> float:
    """
    Return (|z| / threshold) * 100 clamped to [0, 100].

    Exactly 100 at the threshold; 0 only when z is 0. A NaN z-score scores 0.
    """

    score = (abs(zscore) / threshold) * MAX_SCORE
    if isnan(score):
        return 0.0
    return min(max(score, 0.0), MAX_SCORE)
