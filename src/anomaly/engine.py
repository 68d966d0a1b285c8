"""
Response-time anomaly classifier.

Computes a rolling baseline over the trailing window of historical latencies,
derives the z-score of the current sample and classifies the result as
normal, spike or slowdown with a bounded 0-100 anomaly score.

The classifier holds configuration only. Every call works on its own inputs
and returns a fresh AnomalyVerdict, so one instance can serve any number of
threads without locking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from numbers import Real
from typing import Optional, Sequence

from src.core.config import DEFAULT_THRESHOLD, DEFAULT_WINDOW_SIZE, config
from src.core.exceptions import DataValidationError

from .baselines import rolling_mean, rolling_std_dev, validate_window_size
from .detectors import z_score
from .policies import AnomalyPolicy, RelativeMagnitudePolicy, get_policy
from .schema import AnomalyType, AnomalyVerdict
from .scoring import anomaly_score

logger = logging.getLogger(__name__)

MIN_HISTORY = 2


def validate_threshold(threshold: float) -> None:
    if isinstance(threshold, bool) or not isinstance(threshold, Real):
        raise DataValidationError(f"threshold must be a number, got {threshold!r}")
    if not threshold > 0:
        raise DataValidationError(f"threshold must be positive, got {threshold}")


def _default_policy() -> AnomalyPolicy:
    return get_policy(config.anomaly.detection.policy, config.anomaly.policies)


@dataclass(frozen=True)
class AnomalyClassifier:
    """
    Windowed z-score classifier.

    Notes:
    - Fewer than two historical samples never produce an anomaly.
    - Zero dispersion yields a zero z-score, so constant history never flags.
    - |z| equal to the threshold counts as anomalous.
    - Negative z-scores may be anomalous but are always typed unknown.
    """

    window_size: int = DEFAULT_WINDOW_SIZE
    threshold: float = DEFAULT_THRESHOLD
    policy: AnomalyPolicy = field(default_factory=_default_policy)

    def __post_init__(self) -> None:
        validate_window_size(self.window_size)
        validate_threshold(self.threshold)

    @classmethod
    def from_config(cls) -> "AnomalyClassifier":
        detection = config.anomaly.detection
        return cls(window_size=detection.window_size, threshold=detection.threshold)

    def detect(
        self,
        current_value: float,
        historical_values: Sequence[float],
        window_size: Optional[int] = None,
        threshold: Optional[float] = None,
    ) -> AnomalyVerdict:
        """
        Classify current_value against historical_values.

        Args:
            current_value: latest latency sample (ms)
            historical_values: prior samples, oldest first
            window_size: overrides the classifier's window for this call
            threshold: overrides the classifier's threshold for this call

        Returns:
            AnomalyVerdict for the sample

        Raises:
            DataValidationError: if window_size or threshold is not positive
        """
        window_size = self.window_size if window_size is None else window_size
        threshold = self.threshold if threshold is None else threshold
        validate_window_size(window_size)
        validate_threshold(threshold)

        if len(historical_values) < MIN_HISTORY:
            return AnomalyVerdict(
                anomaly_detected=False,
                anomaly_type=AnomalyType.UNKNOWN,
                anomaly_score=0.0,
                mean=current_value,
                std_dev=0.0,
                z_score=0.0,
            )

        mean = rolling_mean(historical_values, window_size)
        std_dev = rolling_std_dev(historical_values, window_size, mean)
        zscore = z_score(current_value, mean, std_dev)

        anomaly_detected = abs(zscore) >= threshold
        anomaly_type = AnomalyType.UNKNOWN
        if anomaly_detected:
            anomaly_type = self.policy.classify(current_value, mean, std_dev, zscore)

        score = anomaly_score(zscore, threshold)

        logger.debug(
            "value=%s mean=%.3f std=%.3f z=%.3f detected=%s type=%s",
            current_value,
            mean,
            std_dev,
            zscore,
            anomaly_detected,
            anomaly_type.value,
        )

        return AnomalyVerdict(
            anomaly_detected=anomaly_detected,
            anomaly_type=anomaly_type,
            anomaly_score=score,
            mean=mean,
            std_dev=std_dev,
            z_score=zscore,
        )


def detect(
    current_value: float,
    historical_values: Sequence[float],
    window_size: int = DEFAULT_WINDOW_SIZE,
    threshold: float = DEFAULT_THRESHOLD,
) -> AnomalyVerdict:
    """
    Classify one sample with the relative-magnitude policy (spike above 2x the mean).

    Convenience wrapper over AnomalyClassifier for callers that do not need a
    configured instance. Environment configuration does not change the result.
    """

    classifier = AnomalyClassifier(
        window_size=window_size,
        threshold=threshold,
        policy=RelativeMagnitudePolicy(),
    )
    return classifier.detect(current_value, historical_values)
