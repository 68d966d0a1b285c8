"""
Unit tests for rolling baseline statistics.
"""

from math import isclose, sqrt

import pytest

from src.anomaly.baselines import compute_baseline, rolling_mean, rolling_std_dev, trailing_window
from src.core.exceptions import DataValidationError


def test_empty_samples_yield_zero():
    assert rolling_mean([], 20) == 0.0
    assert rolling_std_dev([], 20) == 0.0


def test_partial_window_uses_all_samples():
    assert isclose(rolling_mean([1.0, 2.0, 3.0], 10), 2.0)
    assert trailing_window([1.0, 2.0, 3.0], 10) == [1.0, 2.0, 3.0]


def test_full_window_uses_last_samples_only():
    samples = [1.0, 2.0, 3.0, 4.0, 5.0]
    assert trailing_window(samples, 2) == [4.0, 5.0]
    assert isclose(rolling_mean(samples, 2), 4.5)
    assert isclose(rolling_mean(samples, 5), 3.0)


def test_std_dev_is_population_std(stable_history):
    std = rolling_std_dev(stable_history, 20)
    assert isclose(std, 1.7, rel_tol=1e-9)

    # sample std (n - 1) would be sqrt(2) here, population std is 1.0
    assert isclose(rolling_std_dev([0.0, 2.0], 20), 1.0)
    assert not isclose(rolling_std_dev([0.0, 2.0], 20), sqrt(2.0))


def test_std_dev_uses_trailing_window():
    samples = [1000.0, -1000.0, 10.0, 10.0, 10.0]
    assert rolling_std_dev(samples, 3) == 0.0
    assert rolling_std_dev(samples, 5) > 0.0


def test_precomputed_mean_matches_recomputed(stable_history):
    mean = rolling_mean(stable_history, 4)
    assert isclose(rolling_std_dev(stable_history, 4, mean), rolling_std_dev(stable_history, 4))


def test_compute_baseline_reports_window(stable_history):
    baseline = compute_baseline(stable_history, 4)
    assert baseline.count == 4
    assert isclose(baseline.mean, (103.0 + 97.0 + 100.0 + 101.0) / 4)


def test_input_is_not_modified(stable_history):
    snapshot = list(stable_history)
    rolling_std_dev(stable_history, 3)
    assert stable_history == snapshot


@pytest.mark.parametrize("window_size", [0, -5, 2.5, True])
def test_invalid_window_size_rejected(window_size):
    with pytest.raises(DataValidationError):
        rolling_mean([1.0, 2.0], window_size)
    with pytest.raises(DataValidationError):
        rolling_std_dev([1.0, 2.0], window_size)
