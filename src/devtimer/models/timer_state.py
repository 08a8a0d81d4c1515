"""Persisted timer state."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TimerState(BaseModel):
    """The single record stored in the timer file.

    ``current_start`` is the epoch second at which the running segment began
    and is ``None`` while the timer is not running. ``paused_elapsed`` holds the
    seconds already accumulated by the in-progress session.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    total_spent: int = Field(ge=0)
    current_start: int | None = Field(default=None, ge=0)
    paused_elapsed: int = Field(ge=0)

    @classmethod
    def new(cls) -> TimerState:
        """Create the default, idle state."""
        return cls(total_spent=0, current_start=None, paused_elapsed=0)

    @property
    def is_running(self) -> bool:
        """Time is actively accruing."""
        return self.current_start is not None

    @property
    def is_paused(self) -> bool:
        """A session exists but is not accruing."""
        return self.current_start is None and self.paused_elapsed > 0

    @property
    def in_progress(self) -> bool:
        """A session has been started and not yet stopped."""
        return self.is_running or self.paused_elapsed > 0

    def to_json(self) -> str:
        """Serialize to the compact on-disk form."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str | bytes) -> TimerState:
        """Parse the on-disk form. Raises ``pydantic.ValidationError`` on mismatch."""
        return cls.model_validate_json(data)
