"""
Application configuration for the uptime anomaly classifier.

Provides environment-aware settings with conservative defaults. Detection
window, threshold and policy multipliers are configurable to avoid hard-coded
"magic numbers" at call sites.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_WINDOW_SIZE = 20
DEFAULT_THRESHOLD = 3.0


class DetectionConfig(BaseModel):
	"""
	Configuration for the windowed z-score classifier.

	Notes:
	- window_size: number of most recent samples used as the baseline.
	- threshold: |z| at or above this value flags an anomaly.
	- min_history: samples required before detection is attempted.
	- history_limit: recent checks handed to the classifier per evaluation.
	- policy: spike/slowdown split used by AnomalyClassifier ("relative_magnitude" or "sigma_band").
	"""

	window_size: int = Field(DEFAULT_WINDOW_SIZE, ge=1)
	threshold: float = Field(DEFAULT_THRESHOLD, gt=0.0)
	min_history: int = Field(2, ge=2)
	history_limit: int = Field(50, ge=2)
	policy: Literal["relative_magnitude", "sigma_band"] = Field(
		"relative_magnitude",
		description="Classification policy applied to detected anomalies",
	)

	@model_validator(mode="after")
	def _history_limit_covers_min_history(self) -> "DetectionConfig":
		if self.min_history > self.history_limit:
			raise ValueError(
				f"min_history ({self.min_history}) exceeds history_limit ({self.history_limit})"
			)
		return self


class PolicyConfig(BaseModel):
	"""
	Multipliers for the classification policies.

	Rationale:
	- spike_ratio: a response more than this multiple of the mean is a spike.
	- spike_sigma / slowdown_sigma: band edges in standard deviations above the mean.
	"""

	spike_ratio: float = Field(2.0, gt=0.0, description="Relative spike multiple of the mean")
	spike_sigma: float = Field(3.0, gt=0.0, description="Spike band lower edge (sigma)")
	slowdown_sigma: float = Field(2.0, gt=0.0, description="Slowdown band lower edge (sigma)")


class AnomalyConfig(BaseModel):
	"""
	Anomaly detection configuration.
	"""

	detection: DetectionConfig = DetectionConfig()
	policies: PolicyConfig = PolicyConfig()


class Config(BaseSettings):
	"""
	Global configuration with environment overrides.

	Nested values use a double underscore, e.g. UPTIME_ANOMALY__DETECTION__THRESHOLD=2.5.
	"""

	model_config = SettingsConfigDict(
		env_prefix="UPTIME_",
		env_file=".env",
		env_nested_delimiter="__",
		extra="ignore",
	)

	log_level: str = Field("INFO", description="Default logging level")
	logs_dir: Path = Field(Path("logs"), description="Directory for log files")
	anomaly: AnomalyConfig = AnomalyConfig()

	def model_post_init(self, __context: object) -> None:
		self.logs_dir.mkdir(parents=True, exist_ok=True)


config = Config()
