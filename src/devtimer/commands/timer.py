"""Timer commands: start, break, back, stop and spent."""

from devtimer.services.session_machine import Command
from devtimer.services.timer_service import get_timer_service
from devtimer.utils.ui.formatters import format_message

from .decorators import command_wrapper


def _run(command: Command) -> None:
    transition = get_timer_service().run(command)
    format_message(transition.message)


@command_wrapper
def start_timer() -> None:
    """Starts the timer"""
    _run(Command.START)


@command_wrapper
def break_timer() -> None:
    """Pauses the timer and shows current session time"""
    _run(Command.BREAK)


@command_wrapper
def back_timer() -> None:
    """Resumes the timer"""
    _run(Command.BACK)


@command_wrapper
def stop_timer() -> None:
    """Stops the timer and adds session time"""
    _run(Command.STOP)


@command_wrapper
def spent_timer() -> None:
    """Shows total time spent coding"""
    _run(Command.SPENT)
