"""Value types flowing from CLI input to the countdown loop.

Inputs and resolved values are frozen Pydantic models. The countdown
state is a plain dataclass because the engine mutates it once per tick.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time

from pydantic import BaseModel, field_validator

from endzeit.domain.types import DatePrecision, TimePrecision


class CountdownRequest(BaseModel):
    """Raw user input. Every field is independently optional."""

    model_config = {"frozen": True}

    date: str | None = None
    time: str | None = None
    seconds: int | None = None
    command: str | None = None

    @field_validator("date", "time", "command")
    @classmethod
    def _blank_is_absent(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value

    @property
    def has_target(self) -> bool:
        """Whether any field that shapes the target was given."""
        return self.date is not None or self.time is not None or self.seconds is not None


class ResolvedDate(BaseModel):
    """A calendar date with default-filled components."""

    model_config = {"frozen": True}

    value: date
    precision: DatePrecision


class ResolvedTime(BaseModel):
    """A wall-clock time with default-filled components."""

    model_config = {"frozen": True}

    value: time
    precision: TimePrecision


class TargetTimestamp(BaseModel):
    """The absolute local instant the countdown waits for.

    INVARIANT: strictly after the ``now`` it was validated against.
    """

    model_config = {"frozen": True}

    instant: datetime
    date_precision: DatePrecision | None = None
    time_precision: TimePrecision | None = None
    offset_seconds: int | None = None


@dataclass
class CountdownState:
    """Progress of a single countdown run.

    ``total_seconds`` is fixed at start; ``elapsed_seconds`` only moves
    forward and never passes the total.
    """

    target: datetime
    total_seconds: int
    elapsed_seconds: int = 0

    def advance(self, elapsed: int) -> None:
        self.elapsed_seconds = min(max(self.elapsed_seconds, elapsed), self.total_seconds)

    @property
    def complete(self) -> bool:
        return self.elapsed_seconds >= self.total_seconds

    @property
    def percentage(self) -> float:
        """Progress in percent, clamped to ``[0, 100]``."""
        if self.total_seconds <= 0:
            return 100.0
        pct = self.elapsed_seconds / self.total_seconds * 100.0
        return min(max(pct, 0.0), 100.0)


@dataclass(frozen=True)
class CountdownOutcome:
    """How a countdown run ended."""

    state: CountdownState
    ticks: int
    cancelled: bool = False


class ExecutionResult(BaseModel):
    """Outcome of the completion command."""

    model_config = {"frozen": True}

    command: str | None = None
    ran: bool = False
    returncode: int | None = None
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return not self.ran or self.returncode == 0
