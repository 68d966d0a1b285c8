"""
Classification policies for detected anomalies.

Two notions of spike/slowdown coexist and are kept separate on purpose:

- RelativeMagnitudePolicy: a spike is more than spike_ratio times the mean;
  anything else above the baseline is a slowdown. Used by detect by default.
- SigmaBandPolicy: spike and slowdown are bands measured in standard
  deviations above the mean, matching is_spike / is_slowdown.

Policies are only consulted once an anomaly has been detected. Responses faster
than the baseline (z <= 0) are never labelled spike or slowdown.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional

from src.core.config import PolicyConfig
from src.core.exceptions import ConfigurationError

from .schema import AnomalyType


class AnomalyPolicy(ABC):
    """
    Abstract base for spike/slowdown classification.
    """

    name: ClassVar[str] = ""

    @abstractmethod
    def classify(self, current_value: float, mean: float, std_dev: float, zscore: float) -> AnomalyType:
        """
        Classify a sample already flagged as anomalous.

        Args:
            current_value: the latency being classified
            mean: baseline mean
            std_dev: baseline population standard deviation
            zscore: z-score of current_value against the baseline

        Returns:
            AnomalyType for the sample
        """
        pass


@dataclass(frozen=True)
class RelativeMagnitudePolicy(AnomalyPolicy):
    """
    Spike when current_value exceeds spike_ratio * mean, otherwise slowdown.
    """

    spike_ratio: float = 2.0
    name: ClassVar[str] = "relative_magnitude"

    def classify(self, current_value: float, mean: float, std_dev: float, zscore: float) -> AnomalyType:
        if zscore <= 0:
            return AnomalyType.UNKNOWN
        if current_value > mean * self.spike_ratio:
            return AnomalyType.SPIKE
        return AnomalyType.SLOWDOWN


@dataclass(frozen=True)
class SigmaBandPolicy(AnomalyPolicy):
    """
    Spike above mean + spike_sigma*std; slowdown in (mean + slowdown_sigma*std, mean + spike_sigma*std].

    With a detection threshold below slowdown_sigma, values under the slowdown
    band stay unknown.
    """

    spike_sigma: float = 3.0
    slowdown_sigma: float = 2.0
    name: ClassVar[str] = "sigma_band"

    def classify(self, current_value: float, mean: float, std_dev: float, zscore: float) -> AnomalyType:
        if zscore <= 0:
            return AnomalyType.UNKNOWN
        upper = mean + self.spike_sigma * std_dev
        lower = mean + self.slowdown_sigma * std_dev
        if current_value > upper:
            return AnomalyType.SPIKE
        if current_value > lower:
            return AnomalyType.SLOWDOWN
        return AnomalyType.UNKNOWN


def get_policy(name: str, policy_config: Optional[PolicyConfig] = None) -> AnomalyPolicy:
    """
    Build a policy by name using the configured multipliers.

    Raises:
        ConfigurationError: if the name is not a known policy
    """

    policy_config = policy_config or PolicyConfig()
    if name == RelativeMagnitudePolicy.name:
        return RelativeMagnitudePolicy(spike_ratio=policy_config.spike_ratio)
    if name == SigmaBandPolicy.name:
        if policy_config.slowdown_sigma >= policy_config.spike_sigma:
            raise ConfigurationError("slowdown_sigma must be below spike_sigma")
        return SigmaBandPolicy(
            spike_sigma=policy_config.spike_sigma,
            slowdown_sigma=policy_config.slowdown_sigma,
        )
    raise ConfigurationError(f"Unknown anomaly policy: {name}")
