"""Session state machine.

Every command is a pure transition from ``(state, now)`` to a new state and a
one-line message for the user. Nothing here touches the clock or the disk;
callers load the state, pass the current epoch second and persist the result.

Transitions:

* ``start``: idle -> running
* ``break``: running -> paused
* ``back``: paused -> running
* ``stop``: running/paused -> idle, adding the session time to the total
* ``spent``: read-only
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from devtimer.models.timer_state import TimerState
from devtimer.utils.formatting import format_duration

MSG_ALREADY_IN_PROGRESS = (
    "A session is already in progress. Use 'stop' to finish the current session."
)
MSG_STARTED = "Timer started."
MSG_NOT_RUNNING = "Timer is not running."
MSG_RESUMED = "Resumed."
MSG_ALREADY_RUNNING = "Timer is already running."
MSG_NOTHING_TO_RESUME = "No paused session to resume. Use 'start' to begin a session."
MSG_INVALID_COMMAND = "Invalid command. Use 'devtimer --help' for usage info."


class Command(str, Enum):
    """Commands understood by the state machine."""

    START = "start"
    BREAK = "break"
    BACK = "back"
    STOP = "stop"
    SPENT = "spent"


@dataclass(frozen=True)
class Transition:
    """Result of applying one command."""

    state: TimerState
    message: str
    changed: bool = False


def _elapsed_since(start: int, now: int) -> int:
    # Saturate on clock anomalies (now earlier than start).
    return max(0, now - start)


def start(state: TimerState, now: int) -> Transition:
    """Begin a new session unless one is already in progress."""
    if state.in_progress:
        return Transition(state, MSG_ALREADY_IN_PROGRESS)
    return Transition(
        state.model_copy(update={"current_start": now}), MSG_STARTED, changed=True
    )


def pause(state: TimerState, now: int) -> Transition:
    """Fold the running segment into ``paused_elapsed`` and stop accruing."""
    if state.current_start is None:
        return Transition(state, MSG_NOT_RUNNING)

    paused_elapsed = state.paused_elapsed + _elapsed_since(state.current_start, now)
    new_state = state.model_copy(
        update={"current_start": None, "paused_elapsed": paused_elapsed}
    )
    return Transition(
        new_state,
        f"Paused. Current session time: {format_duration(paused_elapsed)}",
        changed=True,
    )


def resume(state: TimerState, now: int) -> Transition:
    """Start accruing again on a paused session."""
    if state.is_running:
        return Transition(state, MSG_ALREADY_RUNNING)
    if not state.is_paused:
        return Transition(state, MSG_NOTHING_TO_RESUME)
    return Transition(
        state.model_copy(update={"current_start": now}), MSG_RESUMED, changed=True
    )


def session_time(state: TimerState, now: int) -> int:
    """Seconds the current session would contribute if stopped at ``now``."""
    if state.current_start is not None:
        return _elapsed_since(state.current_start, now) + state.paused_elapsed
    return state.paused_elapsed


def stop(state: TimerState, now: int) -> Transition:
    """Finish the session and add its time to ``total_spent``."""
    seconds = session_time(state, now)
    if seconds == 0:
        return Transition(state, MSG_NOT_RUNNING)

    new_state = TimerState(
        total_spent=state.total_spent + seconds,
        current_start=None,
        paused_elapsed=0,
    )
    return Transition(
        new_state,
        f"Stopped. Session time: {format_duration(seconds)}",
        changed=True,
    )


def spent(state: TimerState, now: int) -> Transition:
    """Report the accumulated total."""
    return Transition(state, f"Total time spent: {format_duration(state.total_spent)}")


_HANDLERS: dict[Command, Callable[[TimerState, int], Transition]] = {
    Command.START: start,
    Command.BREAK: pause,
    Command.BACK: resume,
    Command.STOP: stop,
    Command.SPENT: spent,
}


def apply_command(state: TimerState, command: Command | str, now: int) -> Transition:
    """Apply ``command`` to ``state`` at epoch second ``now``.

    Unknown command names leave the state untouched and return a usage hint.
    """
    try:
        handler = _HANDLERS[Command(command)]
    except ValueError:
        return Transition(state, MSG_INVALID_COMMAND)
    return handler(state, now)
