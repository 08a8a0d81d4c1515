"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "devtimer"
_LOG_FILE = "devtimer.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _make_handler() -> logging.Handler:
    """Rotating file handler in the user log dir, or a NullHandler if unwritable."""
    try:
        log_dir = Path(user_log_dir(_APP_NAME, appauthor=False))
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_dir / _LOG_FILE,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError:
        return logging.NullHandler()

    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    Logging never stops a command: when the log directory cannot be created
    the logger discards its records.
    """
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    if not any(
        isinstance(h, (logging.handlers.RotatingFileHandler, logging.NullHandler))
        for h in logger.handlers
    ):
        logger.addHandler(_make_handler())

    _logger = logger
    return _logger
