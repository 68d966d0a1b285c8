"""
Command-line audit tool for the anomaly classifier.

Reads a check result and the service's recent latencies (newest first) from a
JSON file, or stdin when the path is "-", and prints the anomaly columns.

    python -m src.checks.cli payload.json --threshold 2.5

Payload shape:

    {"check": {"service_id": "...", "status": "up", "response_time_ms": 480,
               "checked_at": "2026-01-01T00:00:00Z"},
     "history": [101, 99, 100, ...]}
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from src.anomaly.engine import AnomalyClassifier
from src.anomaly.policies import get_policy
from src.core.config import config
from src.core.exceptions import AnomalyDetectionError
from src.core.logging_config import setup_logging

from .evaluator import CheckEvaluator
from .schema import CheckResult


def _load_payload(path: str) -> dict:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def main(argv: Optional[List[str]] = None) -> int:
    detection = config.anomaly.detection
    parser = argparse.ArgumentParser(description="Classify a health check against its latency history")
    parser.add_argument("payload", help="JSON file with 'check' and 'history', or '-' for stdin")
    parser.add_argument("--window-size", type=int, default=detection.window_size)
    parser.add_argument("--threshold", type=float, default=detection.threshold)
    parser.add_argument("--log-level", default=None, help="Overrides UPTIME_LOG_LEVEL")
    parser.add_argument(
        "--policy",
        choices=["relative_magnitude", "sigma_band"],
        default=detection.policy,
    )
    args = parser.parse_args(argv)

    logger = setup_logging(log_level=args.log_level)

    try:
        payload = _load_payload(args.payload)
        result = CheckResult.model_validate(payload["check"])
        history = [float(v) for v in payload.get("history", [])]
        settings = detection.model_copy(
            update={"window_size": args.window_size, "threshold": args.threshold, "policy": args.policy}
        )
        classifier = AnomalyClassifier(
            window_size=settings.window_size,
            threshold=settings.threshold,
            policy=get_policy(settings.policy, config.anomaly.policies),
        )
        evaluator = CheckEvaluator(detection=settings, classifier=classifier)
        anomaly = evaluator.evaluate(result, history)
    except (OSError, KeyError, TypeError, ValueError, AnomalyDetectionError) as exc:
        logger.error("Could not evaluate check: %s", exc)
        return 1

    print(json.dumps(anomaly.model_dump(mode="json", by_alias=True), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
