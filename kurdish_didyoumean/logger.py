"""Logging setup for kurdish_didyoumean.

Records go to ``logs/kurdish_didyoumean.log`` beside the package, rotated at
1 MB with two backups. The default level is WARNING; DEBUG shows one line per
query with the number of candidates that passed the edit-distance threshold.
The CLI can additionally mirror records to stderr.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_DIR = Path(os.path.dirname(__file__)) / "logs"
LOG_FILE = LOG_DIR / "kurdish_didyoumean.log"
LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_BYTES = 1024 * 1024
BACKUP_COUNT = 2
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

PACKAGE_LOGGER = "kurdish_didyoumean"

_file_handler_added = False
_console_handler: logging.Handler | None = None


def level_number(level: str | None) -> int:
    """Map a level name to its ``logging`` constant; unknown names mean WARNING."""
    name = (level or DEFAULT_LOG_LEVEL).strip().upper()
    return getattr(logging, name) if name in VALID_LEVELS else logging.WARNING


def _package_logger() -> logging.Logger:
    global _file_handler_added

    root = logging.getLogger(PACKAGE_LOGGER)
    if _file_handler_added:
        return root
    _file_handler_added = True
    root.setLevel(level_number(DEFAULT_LOG_LEVEL))
    root.propagate = False
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            str(LOG_FILE),
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError:
        # Read-only install location: run without a log file.
        return root
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the ``kurdish_didyoumean`` namespace.

    Module names that already start with the package name are used as-is,
    anything else is nested below it.
    """
    root = _package_logger()
    if not name:
        return root
    if name.startswith(PACKAGE_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def set_log_level(level: str | None, console: bool = False) -> None:
    """Set the package log level; with *console*, also echo records to stderr."""
    global _console_handler

    root = _package_logger()
    root.setLevel(level_number(level))
    if console and _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stderr)
        _console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root.addHandler(_console_handler)
    elif not console and _console_handler is not None:
        root.removeHandler(_console_handler)
        _console_handler = None
    root.info("Log level set to %s", logging.getLevelName(root.level))
