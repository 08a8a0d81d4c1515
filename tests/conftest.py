"""Shared test fixtures and configuration.

Keeps every test away from the real timer file and log directory.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

import pytest

from devtimer.config import TIMER_PATH_ENV, get_settings


def _drop_app_handlers() -> None:
    """Close and remove the handlers get_logger() attaches, leaving pytest's own."""
    logger = logging.getLogger("devtimer")
    for handler in list(logger.handlers):
        if isinstance(handler, (logging.handlers.RotatingFileHandler, logging.NullHandler)):
            handler.close()
            logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolate_logger(tmp_path):
    """Send log output into *tmp_path* and reset the logger singleton."""
    import devtimer.utils.logger as logger_mod

    logger_mod._logger = None
    _drop_app_handlers()

    with patch(
        "devtimer.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")
    ):
        yield

    _drop_app_handlers()
    logger_mod._logger = None


@pytest.fixture(autouse=True)
def timer_file(tmp_path, monkeypatch):
    """Point DEVTIMER_PATH at a timer file inside *tmp_path*."""
    path = tmp_path / "state" / "timer.json"
    monkeypatch.setenv(TIMER_PATH_ENV, str(path))
    get_settings.cache_clear()
    yield path
    get_settings.cache_clear()
