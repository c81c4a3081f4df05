"""
Structured JSON Logging for TwitterAPIKit

Provides a JSON formatter for structured logging output and helpers that
keep credentials out of log records.
"""

import json
import logging
import sys
from typing import Any, Dict, Mapping

REDACTED = "***REDACTED***"
SENSITIVE_HEADERS = {"authorization", "proxy-authorization", "cookie"}


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": int(record.created * 1000),  # milliseconds
            "name": record.name,
            "level": record.levelname,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key in ("task_id", "status_code", "method", "url"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)

        return json.dumps(payload, default=str)


def setup_structured_logger(level: int = logging.INFO) -> None:
    """
    Configure structured JSON logging for the SDK.

    Args:
        level: Logging level (default: logging.INFO)

    Example:
        >>> from twitter_api_kit.logging_setup import setup_structured_logger
        >>> setup_structured_logger(logging.DEBUG)
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    sdk_logger = logging.getLogger("twitter_api_kit")
    sdk_logger.setLevel(level)
    sdk_logger.handlers = [handler]
    sdk_logger.propagate = False


def setup_logging(debug: bool = False) -> None:
    """Plain-text logging for interactive use"""
    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("twitter_api_kit").setLevel(level)


def sanitize_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """
    Redact credential-bearing headers.

    Example:
        >>> sanitize_headers({"Authorization": "Bearer abc", "Accept": "*/*"})
        {'Authorization': '***REDACTED***', 'Accept': '*/*'}
    """
    return {
        key: REDACTED if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }
