"""Logging configuration for the command-line tool.

The interactive session owns the terminal, so records go to a log file
rather than stderr. Output is either single-line text or one JSON object per
record.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

LOGGER_NAME = "belgianlake"
TEXT_FORMAT = "%(asctime)s - %(name)-28s - %(levelname)s - %(message)s"


class SingleLineFormatter(logging.Formatter):
    """Text formatter that keeps every record on one line."""

    def format(self, record: logging.LogRecord) -> str:
        return super().format(record).replace("\n", "\\n")


class JsonLineFormatter(logging.Formatter):
    """Formatter emitting one compact JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(
    *,
    verbose: bool = False,
    json_format: bool = False,
    log_path: Path | None = None,
) -> logging.Logger:
    """Attach exactly one handler to the package logger and return it.

    ``log_path=None`` logs to stderr, which is only appropriate outside the
    interactive session. Calling this again replaces the previous handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_path is None:
        handler: logging.Handler = logging.StreamHandler()
    else:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")

    handler.setFormatter(JsonLineFormatter() if json_format else SingleLineFormatter(TEXT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False
    return logger
