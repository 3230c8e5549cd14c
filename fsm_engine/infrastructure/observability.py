"""Structured Logging — machine-readable logs for the API, readable ones for the CLI.

Invariants:
    - Both formats carry the machine fields (base, modulo, ...) when a record has them
    - JSON lines always include timestamp, level, logger and message
    - setup_logging replaces earlier root handlers, so repeated calls never duplicate lines

Design Decisions:
    - stdlib logging with custom formatters: callers pass fields through extra=
    - Field list is explicit: arbitrary LogRecord attributes are never serialized
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "base", "modulo", "upper_bound", "number", "checked",
    "failed", "error_code", "path",
)


def record_fields(record: logging.LogRecord) -> dict:
    """Machine fields attached to record via extra=."""
    return {
        key: record.__dict__[key]
        for key in EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_fields(record),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Plain line followed by key=value machine fields."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = record_fields(record)
        if fields:
            line += " [" + " ".join(f"{k}={v}" for k, v in fields.items()) + "]"
        return line


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure the root logger with one stream handler."""
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    for existing in list(logging.root.handlers):
        logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
