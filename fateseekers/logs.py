"""Logger set-up writing JSON lines to a rotated file."""

from __future__ import annotations

import json
import logging
import os
import sys
import time
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Union

LOGGER_NAME = "fateseekers"

MAX_SIZE_MB = 100
MAX_BACKUPS = 5
MAX_AGE_DAYS = 28

_LEVELS = {
    "": logging.INFO,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "dpanic": logging.CRITICAL,
    "panic": logging.CRITICAL,
    "fatal": logging.CRITICAL,
}

_STANDARD_ATTRIBUTES = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def _level_name(levelno: int) -> str:
    if levelno >= logging.CRITICAL:
        return "fatal"
    if levelno >= logging.ERROR:
        return "error"
    if levelno >= logging.WARNING:
        return "warn"
    if levelno >= logging.INFO:
        return "info"
    return "debug"


def _parse_level(level: str) -> int:
    try:
        return _LEVELS[level.lower()]
    except KeyError:
        raise ValueError(f"unrecognized level: {level!r}") from None


class JsonFormatter(logging.Formatter):
    """Formats a record as one JSON object per line."""

    def __init__(self, include_caller: bool = False) -> None:
        super().__init__()
        self.include_caller = include_caller

    def format(self, record: logging.LogRecord) -> str:
        moment = datetime.fromtimestamp(record.created).astimezone()
        payload: dict[str, Any] = {
            "level": _level_name(record.levelno),
            "timestamp": moment.strftime("%Y-%m-%dT%H:%M:%S.")
            + f"{int(record.msecs):03d}"
            + moment.strftime("%z"),
        }
        if self.include_caller:
            payload["caller"] = f"{os.path.basename(record.pathname)}:{record.lineno}"
        payload["msg"] = record.getMessage()
        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRIBUTES and key not in payload:
                payload[key] = value
        if record.exc_info:
            payload["stacktrace"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=False)


class _AgedRotatingFileHandler(RotatingFileHandler):
    """Rotating file handler that also drops backups older than MAX_AGE_DAYS."""

    def doRollover(self) -> None:
        super().doRollover()
        cutoff = time.time() - MAX_AGE_DAYS * 24 * 3600
        for index in range(1, self.backupCount + 1):
            backup = Path(f"{self.baseFilename}.{index}")
            if backup.exists() and backup.stat().st_mtime < cutoff:
                backup.unlink()


def configure(
    directory: Union[str, Path],
    name: str,
    level: str,
    debug: bool = False,
    console: bool = False,
) -> logging.Logger:
    """Configure and return the package logger.

    The log file is rotated at start-up. In debug mode records carry their
    caller and, if console is set, are also written to standard error.
    Raises ValueError for an unknown level name.
    """
    threshold = _parse_level(level)

    path = Path(directory) / name
    path.parent.mkdir(parents=True, exist_ok=True)
    existed = path.exists()
    file_handler = _AgedRotatingFileHandler(
        path,
        maxBytes=MAX_SIZE_MB * 1024 * 1024,
        backupCount=MAX_BACKUPS,
        encoding="utf-8",
        delay=True,
    )
    if existed:
        file_handler.doRollover()

    handlers: list[logging.Handler] = [file_handler]
    if debug and console:
        handlers.insert(0, logging.StreamHandler(sys.stderr))

    formatter = JsonFormatter(include_caller=debug)
    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(threshold)
    logger.propagate = False
    return logger