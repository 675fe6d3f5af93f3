"""
Reinterpretation models.

ReinterpretRequest carries the raw text of a submission the grammar could
not parse plus enough context for the helper to guess a command.
ReinterpretResult is either a single command line or a failure reason.

Example:
    >>> request = ReinterpretRequest(
    ...     text="exmine desk",
    ...     room_id="main",
    ...     inventory=[],
    ...     puzzle=PuzzleState(),
    ... )
    >>> ReinterpretResult(command="examine desk")
    >>> ReinterpretResult(error="TIMEOUT")
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from mansion.models.game import PuzzleState
from mansion.models.world import RoomId


class ReinterpretError(str, Enum):
    """Failure reasons reported by the reinterpreter."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"  # Empty text after sanitizing
    AI_NOT_CONFIGURED = "AI_NOT_CONFIGURED"  # Provider key missing
    TIMEOUT = "TIMEOUT"
    INTERNAL = "INTERNAL"


class ReinterpretRequest(BaseModel):
    """Raw text plus game context for the reinterpreter."""

    text: str
    room_id: RoomId
    inventory: list[str] = Field(default_factory=list)
    puzzle: PuzzleState = Field(default_factory=PuzzleState)


class ReinterpretResult(BaseModel):
    """Best-guess command line, or a failure reason.

    An empty command with no error means the helper had no usable
    suggestion.
    """

    command: str = ""
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None
