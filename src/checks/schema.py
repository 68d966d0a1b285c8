"""
Schema for health-check results and their anomaly columns.

A check result is produced by the external prober; CheckAnomaly carries the
three values stored alongside it (anomaly_detected, anomaly_type, anomaly_score).
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from src.anomaly.schema import AnomalyType, AnomalyVerdict


class CheckStatus(str, Enum):
    """Outcome of a single probe."""

    UP = "up"
    DOWN = "down"
    DEGRADED = "degraded"


class CheckResult(BaseModel):
    """
    One probe result for a monitored service.

    Fields:
    - service_id: monitored service identifier
    - status: probe outcome
    - response_time_ms: measured latency, None when no response was timed
    - status_code: HTTP status code if applicable
    - error_message: probe error, if any
    - checked_at: probe timestamp
    """

    service_id: str
    status: CheckStatus
    response_time_ms: Optional[float] = Field(default=None, ge=0.0)
    status_code: Optional[int] = None
    error_message: Optional[str] = None
    checked_at: datetime


class CheckAnomaly(BaseModel):
    """
    Anomaly columns for a check result.

    All three stay unset (False/None/None) when detection was skipped:
    the check was not up, had no latency, or the service lacks history.
    """

    anomaly_detected: bool = False
    anomaly_type: Optional[AnomalyType] = None
    anomaly_score: Optional[float] = Field(default=None, ge=0.0, le=100.0)
    verdict: Optional[AnomalyVerdict] = None

    @property
    def evaluated(self) -> bool:
        return self.verdict is not None
