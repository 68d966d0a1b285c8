"""
Anomaly module: Statistical anomaly detection over response-time telemetry.

Implements rolling baselines, z-score detection, classification policies,
scoring, and immutable verdicts.
"""

from .baselines import compute_baseline, rolling_mean, rolling_std_dev
from .detectors import is_slowdown, is_spike, z_score
from .engine import AnomalyClassifier, detect
from .policies import AnomalyPolicy, RelativeMagnitudePolicy, SigmaBandPolicy, get_policy
from .schema import AnomalyType, AnomalyVerdict, BaselineStats
from .scoring import anomaly_score

__all__ = [
	"AnomalyClassifier",
	"AnomalyVerdict",
	"AnomalyType",
	"BaselineStats",
	"AnomalyPolicy",
	"RelativeMagnitudePolicy",
	"SigmaBandPolicy",
	"get_policy",
	"detect",
	"is_spike",
	"is_slowdown",
	"z_score",
	"rolling_mean",
	"rolling_std_dev",
	"compute_baseline",
	"anomaly_score",
]
