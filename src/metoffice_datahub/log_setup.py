"""JSON console logging for applications embedding the forecast decoder.

Library modules only emit DEBUG records through ``logging.getLogger(__name__)``.
An application opts in to seeing them with `configure_logging`, which reads
the level from `Settings`.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any, TextIO

from .config import Settings, load_settings
from .redaction import sanitize_for_logging, sanitize_text

PACKAGE_LOGGER = "metoffice_datahub"


class JsonConsoleFormatter(logging.Formatter):
    """One JSON object per record with credentials redacted.

    A ``context`` mapping passed through ``extra=`` is emitted under its own key.
    """

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": sanitize_text(record.getMessage()),
        }
        context = getattr(record, "context", None)
        if isinstance(context, dict) and context:
            event["context"] = sanitize_for_logging(context)
        if record.exc_info:
            event["exception"] = sanitize_text(self.formatException(record.exc_info))
        return json.dumps(event, default=str, ensure_ascii=False)


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: int | str = logging.INFO,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a single JSON console handler to ``name`` and set its level.

    Calling it again only updates the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(JsonConsoleFormatter())
        logger.addHandler(handler)
    return logger


def configure_logging(
    settings: Settings | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Install package logging at ``METOFFICE_LOG_LEVEL``.

    Loads settings from the environment when none are given, so a bad
    configuration surfaces as `ConfigError` here.
    """
    settings = settings or load_settings()
    logger = setup_logger(PACKAGE_LOGGER, settings.log_level, stream)
    logger.debug("Logging configured", extra={"context": settings.safe_summary()})
    return logger
