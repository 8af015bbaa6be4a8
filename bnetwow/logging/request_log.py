"""Structured JSON request logging.

ApiClient logs one record per API call to the ``bnetwow.requests`` logger.
The library never installs handlers itself; applications call
``setup_logging()`` once at startup to get JSON lines on stdout, plus an
optional file copy via REQUEST_LOG_FILE. Without it, records propagate to
whatever the application configured on the root logger.

Secrets are masked before they reach a log record.
"""

import json
import logging
import re
import sys
import time
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone

from bnetwow.config.settings import get_settings

LOGGER_NAME = "bnetwow.requests"

# Request-scoped context for correlating log entries
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

_APIKEY_RE = re.compile(r"([?&]apikey=)[^&]+")


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": request_id_var.get(""),
        }
        # Merge any extra fields passed via `extra={}` kwarg
        if hasattr(record, "request_data"):
            log_entry.update(record.request_data)
        return json.dumps(log_entry, default=str)


def setup_logging() -> None:
    """Configure the request logger with JSON output."""
    settings = get_settings()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    logger.handlers.clear()

    formatter = JSONFormatter()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    logger.addHandler(stdout_handler)

    if settings.request_log_file:
        file_handler = logging.FileHandler(settings.request_log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger (avoids duplicate output)
    logger.propagate = False


def get_request_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def generate_request_id() -> str:
    return uuid.uuid4().hex[:12]


def mask_url(url: str) -> str:
    """Replace the apikey query value with a fixed mask, if one is present."""
    return _APIKEY_RE.sub(r"\1***", url)


class RequestTimer:
    """Context manager to measure request latency."""

    def __init__(self):
        self.start_time: float = 0
        self.elapsed_ms: float = 0

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed_ms = round((time.perf_counter() - self.start_time) * 1000, 2)
