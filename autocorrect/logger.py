"""
Logging for the autocorrect package.

Importing the package only sets up the ``autocorrect`` logger with a
``NullHandler``; nothing is written until a front end calls
:func:`enable_file_logging`. The command line does so, sending records to
``~/.autocorrect/logs/autocorrect.log`` through a ``RotatingFileHandler``
(rotated to .log.1, .log.2 up to ``BACKUP_COUNT`` backups).

Default level is WARNING. ``--log-level DEBUG`` shows how each query was
scored.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_DIR = Path.home() / ".autocorrect" / "logs"
LOG_FILE = LOG_DIR / "autocorrect.log"
LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_BYTES = 1 * 1024 * 1024
BACKUP_COUNT = 2
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ROOT_LOGGER_NAME = "autocorrect"

_initialized = False
_file_handler: RotatingFileHandler | None = None


def _setup_root_logger(level: str | None = None) -> logging.Logger:
    """Configure the package root logger without touching the filesystem."""
    global _initialized

    root = logging.getLogger(_ROOT_LOGGER_NAME)

    if _initialized:
        if level is not None:
            root.setLevel(_resolve_level(level))
        return root

    root.setLevel(_resolve_level(level))
    # Keep library output out of the host application's root logger.
    root.propagate = False
    root.addHandler(logging.NullHandler())

    _initialized = True
    return root


def _resolve_level(level: str) -> int:
    """Convert a level name to a ``logging`` constant, defaulting to WARNING."""
    name = (level or DEFAULT_LOG_LEVEL).upper().strip()
    if name not in VALID_LEVELS:
        return logging.WARNING
    return getattr(logging, name)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``autocorrect.<name>``, or the package logger itself."""
    _setup_root_logger()
    if name and name.startswith(_ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    if name:
        return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
    return logging.getLogger(_ROOT_LOGGER_NAME)


def set_log_level(level: str) -> None:
    """Change the effective log level for the whole package at runtime."""
    root = _setup_root_logger(level)
    root.info("Log level changed to %s", (level or DEFAULT_LOG_LEVEL).upper())


def enable_file_logging() -> bool:
    """Attach the rotating log file (idempotent).

    The file is opened on the first record. Returns False when the log
    directory cannot be created, in which case logging stays disabled.
    """
    global _file_handler

    root = _setup_root_logger()
    if _file_handler is not None:
        return True
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError:
        return False

    fh = RotatingFileHandler(
        str(LOG_FILE),
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
        delay=True,
    )
    fh.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(fh)
    _file_handler = fh
    return True


def disable_file_logging() -> None:
    """Detach and close the log file handler, if one is attached."""
    global _file_handler

    if _file_handler is None:
        return
    logging.getLogger(_ROOT_LOGGER_NAME).removeHandler(_file_handler)
    _file_handler.close()
    _file_handler = None
