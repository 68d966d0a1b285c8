"""
Unit tests for anomaly scoring.
"""

from math import isclose, nan

from src.anomaly.scoring import anomaly_score


def test_score_at_threshold_is_100():
    assert anomaly_score(3.0, 3.0) == 100.0
    assert anomaly_score(-3.0, 3.0) == 100.0


def test_score_is_proportional_below_threshold():
    assert isclose(anomaly_score(1.5, 3.0), 50.0)
    assert isclose(anomaly_score(-0.75, 3.0), 25.0)


def test_score_is_clamped():
    assert anomaly_score(1e12, 3.0) == 100.0
    assert anomaly_score(float("inf"), 3.0) == 100.0


def test_zero_z_scores_zero():
    assert anomaly_score(0.0, 3.0) == 0.0


def test_nan_z_scores_zero():
    assert anomaly_score(nan, 3.0) == 0.0
