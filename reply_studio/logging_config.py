"""Centralized logging configuration for the reply studio service."""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from reply_studio.config import settings

NOISY_LOGGERS = ("openai", "httpx", "httpcore", "urllib3")


class JSONFormatter(logging.Formatter):
    """One JSON object per line with timestamp, level, logger and message."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Install a single stream handler on the root logger.

    Args:
        level: Logging level name. Defaults to ``settings.log_level``;
            unknown names fall back to INFO.
        fmt: ``"json"`` for JSON lines, anything else for human-readable
            output. Defaults to ``settings.log_format``.
    """
    level_name = (level or settings.log_level).upper()
    resolved_level = getattr(logging, level_name, None)
    if not isinstance(resolved_level, int):
        resolved_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(resolved_level)
    if (fmt or settings.log_format).lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
