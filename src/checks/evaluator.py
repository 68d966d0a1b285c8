"""
Check evaluator.

Runs the anomaly classifier on each successful health check. Storage returns a
service's previous up-check latencies newest first; the evaluator bounds and
reorders them chronologically before classification.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from src.anomaly.engine import AnomalyClassifier
from src.core.config import DetectionConfig, config

from .schema import CheckAnomaly, CheckResult, CheckStatus

logger = logging.getLogger(__name__)


class CheckEvaluator:
    """
    Attaches anomaly columns to check results.

    Rules:
    - Only up checks with a measured response time are classified.
    - At most history_limit recent latencies are used.
    - Fewer than min_history latencies skip detection.
    """

    def __init__(
        self,
        detection: Optional[DetectionConfig] = None,
        classifier: Optional[AnomalyClassifier] = None,
    ) -> None:
        self.detection = detection or config.anomaly.detection
        self.classifier = classifier or AnomalyClassifier(
            window_size=self.detection.window_size,
            threshold=self.detection.threshold,
        )

    def evaluate(self, result: CheckResult, recent_response_times: Sequence[float]) -> CheckAnomaly:
        """
        Classify a check result against the service's recent latencies.

        Args:
            result: the check result being recorded
            recent_response_times: previous up-check latencies, newest first

        Returns:
            CheckAnomaly with the columns to persist
        """
        if result.status != CheckStatus.UP or result.response_time_ms is None:
            return CheckAnomaly()

        history = self.chronological_history(recent_response_times)
        if len(history) < self.detection.min_history:
            return CheckAnomaly()

        verdict = self.classifier.detect(result.response_time_ms, history)

        if verdict.anomaly_detected:
            logger.info(
                "Anomaly on service %s: %s detected (score: %.2f, z-score: %.2f)",
                result.service_id,
                verdict.anomaly_type.value,
                verdict.anomaly_score,
                verdict.z_score,
            )

        return CheckAnomaly(
            anomaly_detected=verdict.anomaly_detected,
            anomaly_type=verdict.anomaly_type,
            anomaly_score=verdict.anomaly_score,
            verdict=verdict,
        )

    def chronological_history(self, recent_response_times: Sequence[float]) -> List[float]:
        latest = list(recent_response_times)[: self.detection.history_limit]
        latest.reverse()
        return latest
