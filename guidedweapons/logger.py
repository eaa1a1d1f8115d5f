"""JSON logging set up by environment name."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from typing import Any

ENV_LOCAL = "local"
ENV_PROD = "production"

_LEVELS = {ENV_LOCAL: logging.DEBUG, ENV_PROD: logging.INFO}
_LEVEL_NAMES = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "ERROR",
}
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """Formats each record as one JSON object with time, level, msg and extra attributes."""

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).astimezone()
        entry: dict[str, Any] = {
            "time": stamp.isoformat(timespec="milliseconds"),
            "level": _LEVEL_NAMES.get(record.levelno, record.levelname),
            "msg": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                entry[key] = value
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


def new_logger(env: str) -> logging.Logger:
    """Return the application logger writing JSON to stdout for ``env``."""
    try:
        level = _LEVELS[env]
    except KeyError:
        raise ValueError(f"unknown environment {env!r}") from None
    logger = logging.getLogger("guidedweapons")
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    return logger


def error_attr(exc: BaseException) -> dict[str, str]:
    """Return an ``error`` attribute for use as ``extra`` in a log call."""
    return {"error": str(exc)}