"""
Custom exceptions for the uptime anomaly classifier.

The statistics never raise on thin or degenerate history; these exceptions are
reserved for caller contract violations and bad configuration.
"""


class AnomalyDetectionError(Exception):
    """Base exception for anomaly detection failures."""
    pass


class DataValidationError(AnomalyDetectionError):
    """Raised when caller input (window size, threshold) fails validation."""
    pass


class ConfigurationError(AnomalyDetectionError):
    """Raised when configuration is invalid or names an unknown policy."""
    pass
