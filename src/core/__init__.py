"""
Core module: Configuration, logging, and exception handling.
"""

from .config import DEFAULT_THRESHOLD, DEFAULT_WINDOW_SIZE, Config, config
from .exceptions import (
	AnomalyDetectionError,
	ConfigurationError,
	DataValidationError,
)

__all__ = [
	"Config",
	"config",
	"DEFAULT_WINDOW_SIZE",
	"DEFAULT_THRESHOLD",
	"AnomalyDetectionError",
	"DataValidationError",
	"ConfigurationError",
]
