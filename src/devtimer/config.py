"""Configuration for devtimer.

The only setting is the location of the timer file. ``DEVTIMER_PATH`` overrides
it; otherwise the file lives in the per-user configuration directory (the local
data directory on Windows).
"""

from __future__ import annotations

import os
import sys
from functools import lru_cache
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, Field

APP_NAME = "devtimer"
TIMER_PATH_ENV = "DEVTIMER_PATH"
TIMER_FILE_NAME = "timer.json"


def default_timer_path() -> Path:
    """Per-OS default location of the timer file."""
    if sys.platform == "win32":
        base_dir = user_data_dir(APP_NAME, appauthor=False)
    else:
        base_dir = user_config_dir(APP_NAME, appauthor=False)
    return Path(base_dir) / TIMER_FILE_NAME


def resolve_timer_path(environ: dict[str, str] | None = None) -> Path:
    """Return the timer file path, honouring the ``DEVTIMER_PATH`` override."""
    if environ is None:
        environ = os.environ
    override = environ.get(TIMER_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return default_timer_path()


class Settings(BaseModel):
    """Runtime settings."""

    timer_path: Path = Field(default_factory=resolve_timer_path)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings, resolving them on first use."""
    return Settings()
