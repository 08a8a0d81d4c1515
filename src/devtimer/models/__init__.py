"""Data models for devtimer."""

from .timer_state import TimerState

__all__ = ["TimerState"]
