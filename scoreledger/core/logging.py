"""Structured logging setup."""

from __future__ import annotations

import json
import logging

from .config import LOG_LEVEL
from .time import utcnow


class JsonLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": utcnow().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Route every logger through a single JSON handler on the root logger."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonLogFormatter())
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)


__all__ = ["JsonLogFormatter", "configure_logging"]
