"""
Schema definitions for response-time anomaly detection.

Verdicts are immutable value objects built fresh on every call. Field names are
snake_case in Python and camelCase on the wire (anomalyDetected, zScore, ...).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnomalyType(str, Enum):
    """Classification of a detected latency anomaly."""

    SPIKE = "spike"
    SLOWDOWN = "slowdown"
    UNKNOWN = "unknown"


class BaselineStats(BaseModel):
    """
    Baseline statistics over the trailing window.

    Fields:
    - mean: arithmetic mean of the window
    - std: population standard deviation of the window
    - count: number of samples in the window
    """

    model_config = ConfigDict(frozen=True)

    mean: float
    std: float
    count: int = Field(ge=0)


class AnomalyVerdict(BaseModel):
    """
    Result of classifying one response-time sample against its history.

    Fields:
    - anomaly_detected: True when |z_score| >= threshold
    - anomaly_type: spike, slowdown or unknown
    - anomaly_score: |z| / threshold scaled to [0, 100]
    - mean / std_dev: baseline used for the z-score
    - z_score: signed distance from the mean in standard deviations
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    anomaly_detected: bool
    anomaly_type: AnomalyType
    anomaly_score: float = Field(ge=0.0, le=100.0)
    mean: float
    std_dev: float
    z_score: float
