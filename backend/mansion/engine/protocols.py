"""
Protocol definitions for the mansion engine.

The engine talks to its collaborators only through these interfaces, so
storage, the reinterpretation helper and command handlers can be swapped
(or mocked in tests) without touching the core.

Component Flow:
    Player Input -> CommandParser -> ParsedCommand
                         |
                         v (UNKNOWN + likely typo + AI help on)
                    Reinterpreter -> command line -> CommandParser
                         |
                         v
                    CommandHandler -> CommandResult -> StateStore
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mansion.models.command import ParsedCommand
    from mansion.models.game import (
        CommandResult,
        GameState,
        GameStateUpdate,
        SessionState,
    )
    from mansion.models.reinterpret import ReinterpretRequest, ReinterpretResult


@runtime_checkable
class CommandHandler(Protocol):
    """Protocol for applying one family of commands to the game state.

    Handlers never mutate GameState. They return a CommandResult whose
    `updates` the caller persists. Invalid preconditions are answered with
    narration, never with an exception.
    """

    def handle(
        self,
        command: "ParsedCommand",
        state: "GameState",
        session: "SessionState",
    ) -> "CommandResult":
        """Apply the command.

        Args:
            command: The parsed command
            state: Current game state (read-only)
            session: Ephemeral session data (may be mutated)

        Returns:
            CommandResult with narration, optional delta and trigger
        """
        ...


@runtime_checkable
class StateStore(Protocol):
    """Protocol for durable per-player game state."""

    def ensure(self, player_id: str) -> "GameState":
        """Load the player's state, creating and saving defaults if absent."""
        ...

    def save(self, player_id: str, updates: "GameStateUpdate") -> None:
        """Durably apply a partial update."""
        ...


@runtime_checkable
class Reinterpreter(Protocol):
    """Protocol for the helper that guesses a command from a near miss.

    Implementations must not raise: failures are reported through
    ReinterpretResult.error.
    """

    async def reinterpret(
        self, request: "ReinterpretRequest"
    ) -> "ReinterpretResult":
        ...
