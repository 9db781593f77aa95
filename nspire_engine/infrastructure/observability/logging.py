"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from nspire_engine.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


LOG_FORMAT = "%(timestamp)s %(level)s %(name)s %(message)s"


def setup_logging(level: str | None = None) -> logging.Handler:
    """
    Route root-logger output to stdout as one JSON object per line.

    Replaces any handlers already installed so scoring records are not
    emitted twice. level defaults to NSPIRE_LOG_LEVEL.
    """
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(CustomJsonFormatter(LOG_FORMAT))
    root.addHandler(handler)
    return handler


def log_score(
    property_id: str,
    sample_size: int,
    total_score: float,
    ups: float,
    is_auto_fail: bool,
    passed: bool,
    duration_ms: float,
) -> None:
    """Log structured scoring outcome for analysis"""
    logging.info(
        "Score computed",
        extra={
            "property_id": property_id,
            "step": "score_complete",
            "sample_size": sample_size,
            "total_score": round(total_score, 4),
            "unit_performance_score": round(ups, 4),
            "is_auto_fail": is_auto_fail,
            "inspection_outcome": "pass" if passed else "fail",
            "duration_ms": duration_ms,
        },
    )
