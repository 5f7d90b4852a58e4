"""Structured JSON logging configuration."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from barbershop.config import get_settings

_EXTRA_FIELDS = ("user_id", "appointment_id", "request_path")


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Every record carries timestamp, level, logger and message. The
    user_id, appointment_id and request_path extras are copied when a
    caller passes them through ``extra=``.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in _EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging() -> None:
    """
    Configure root logging with the JSON formatter on stderr.

    Reads LOG_LEVEL from settings (default: INFO).
    """
    settings = get_settings()
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)

    root_logger.info(f"Logging configured: level={settings.LOG_LEVEL}, format=JSON")
