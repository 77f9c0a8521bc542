"""Configure application logging using the Python standard library.

One stderr handler on the root logger, JSON lines per record. stdout is
left to the cashier-facing output.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone


class JsonFormatter(logging.Formatter):
    """Format log records as JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.module,
            "message": record.getMessage(),
        }
        # Merge an ``extra={"extra": {...}}`` dict into the top level
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            log_record.update(extra)
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record, ensure_ascii=False)


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Install the JSON stderr handler on the root logger.

    Existing root handlers are removed, so calling this twice is harmless.
    """
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger()
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(JsonFormatter())
    console_handler.setLevel(level)
    logger.addHandler(console_handler)
