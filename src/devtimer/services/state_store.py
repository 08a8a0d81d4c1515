"""Persistence of the timer state to a single JSON file."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from devtimer.exceptions import StateStoreError
from devtimer.models.timer_state import TimerState
from devtimer.utils.logger import get_logger


class StateStore:
    """Loads and saves the ``TimerState`` record.

    A missing, empty or unparsable file yields the default state. Failing to
    create the directory or open the file is a configuration problem and raises
    ``StateStoreError``.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.logger = get_logger()

    def _ensure_file(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StateStoreError(
                f"Failed to create config directory {self.path.parent}: {e}"
            ) from e
        try:
            self.path.touch(exist_ok=True)
        except OSError as e:
            raise StateStoreError(
                f"Failed to open or create timer file {self.path}: {e}"
            ) from e

    def load(self) -> TimerState:
        """Load state from file, creating the file if absent."""
        self._ensure_file()

        try:
            data = self.path.read_text(encoding="utf-8")
        except (PermissionError, IsADirectoryError) as e:
            raise StateStoreError(f"Failed to open timer file {self.path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning("could not read %s, using defaults: %s", self.path, e)
            return TimerState.new()

        if not data.strip():
            self.logger.debug("timer file %s is empty, using defaults", self.path)
            return TimerState.new()

        try:
            state = TimerState.from_json(data)
        except ValidationError as e:
            self.logger.warning(
                "timer file %s is invalid, using defaults: %s",
                self.path,
                e.errors(include_url=False),
            )
            return TimerState.new()

        self.logger.debug("loaded timer state from %s: %s", self.path, state.to_json())
        return state

    def save(self, state: TimerState) -> None:
        """Overwrite the file with ``state``."""
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(state.to_json())
        except OSError as e:
            raise StateStoreError(f"Failed to write to timer file {self.path}: {e}") from e

        self.logger.debug("saved timer state to %s: %s", self.path, state.to_json())
