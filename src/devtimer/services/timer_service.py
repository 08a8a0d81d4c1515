"""One load, transition, save cycle per command."""

from __future__ import annotations

import time
from collections.abc import Callable

from devtimer.config import get_settings
from devtimer.services.session_machine import Command, Transition, apply_command
from devtimer.services.state_store import StateStore
from devtimer.utils.logger import get_logger


def current_timestamp() -> int:
    """Wall-clock time in whole seconds since the epoch."""
    return int(time.time())


class TimerService:
    """Applies commands to the persisted timer state."""

    def __init__(
        self,
        store: StateStore,
        clock: Callable[[], int] | None = None,
    ):
        self.store = store
        self.clock = clock if clock is not None else current_timestamp
        self.logger = get_logger()

    def run(self, command: Command | str) -> Transition:
        """Load the state, apply ``command`` at the current time and save.

        The state is written back even when the command leaves it unchanged.
        """
        state = self.store.load()
        now = self.clock()
        transition = apply_command(state, command, now)
        self.logger.info(
            "%s at %d: %s -> %s (%s)",
            getattr(command, "value", command),
            now,
            state.to_json(),
            transition.state.to_json(),
            "changed" if transition.changed else "unchanged",
        )
        self.store.save(transition.state)
        return transition


def get_timer_service() -> TimerService:
    """Build a TimerService for the configured timer file."""
    return TimerService(StateStore(get_settings().timer_path))
