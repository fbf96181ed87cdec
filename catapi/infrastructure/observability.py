"""Structured Logging — JSON and text formatters for the request/error pipeline.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Request context (method, path, cat_id) nested under "request" when present
    - Error and query fields (error_code, reason, operation, row_count, limit) flat
    - Unknown extras never reach the output

Design Decisions:
    - setup_logging called once on startup via lifespan
    - Existing root handlers replaced, so a reload never duplicates lines
    - Text format appends the same fields as key=value pairs
"""

import json
import logging
from datetime import datetime, timezone

REQUEST_FIELDS = ("method", "path", "cat_id")
EVENT_FIELDS = ("error_code", "reason", "operation", "row_count", "limit")


def _collect(record: logging.LogRecord, keys: tuple[str, ...]) -> dict:
    return {
        key: record.__dict__[key]
        for key in keys
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request = _collect(record, REQUEST_FIELDS)
        if request:
            log["request"] = request
        log.update(_collect(record, EVENT_FIELDS))
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable lines for development, extras as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _collect(record, REQUEST_FIELDS + EVENT_FIELDS)
        if not fields:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"{line} [{pairs}]"


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.handlers = [handler]
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
