"""
Health-check evaluation exports.
"""

from .evaluator import CheckEvaluator
from .schema import CheckAnomaly, CheckResult, CheckStatus

__all__ = [
    "CheckEvaluator",
    "CheckAnomaly",
    "CheckResult",
    "CheckStatus",
]
