"""
Meta handler for the mansion engine.

Commands that talk about the game rather than the mansion: help, the mmm
manual, inventory, the AI toggle, quit and unrecognized input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mansion.engine.help import COMMAND_LIST, command_help, full_manual
from mansion.models.command import CommandKind
from mansion.models.game import CommandResult, GameStateUpdate
from mansion.models.trigger import DoubtTrigger

if TYPE_CHECKING:
    from mansion.models.command import ParsedCommand
    from mansion.models.game import GameState, SessionState

SESSION_ENDED = "SESSION ENDED"
UNKNOWN_COMMAND = 'Command not recognized. Type "help" for options.'
NO_HELP = "I don't have help for that yet. Try: mmm help"


class MetaHandler:
    """Handles HELP, MMM_HELP, MMM_HELP_COMMAND, INVENTORY, AI_TOGGLE, QUIT and UNKNOWN."""

    def handle(
        self,
        command: "ParsedCommand",
        state: "GameState",
        session: "SessionState",
    ) -> CommandResult:
        kind = command.kind

        if kind == CommandKind.HELP:
            return CommandResult(narration=list(COMMAND_LIST))

        if kind == CommandKind.MMM_HELP:
            return CommandResult(narration=full_manual())

        if kind == CommandKind.MMM_HELP_COMMAND:
            lines = command_help(command.help_query) if command.help_query else None
            return CommandResult(narration=lines or [NO_HELP])

        if kind == CommandKind.INVENTORY:
            return self.inventory(state)

        if kind == CommandKind.AI_TOGGLE:
            enabled = bool(command.ai_enabled)
            return CommandResult(
                narration=[f"AI help {'enabled' if enabled else 'disabled'}."],
                updates=GameStateUpdate(ai_help_enabled=enabled),
            )

        if kind == CommandKind.QUIT:
            session.ended = True
            return CommandResult(narration=[SESSION_ENDED])

        return CommandResult(narration=[UNKNOWN_COMMAND], trigger=DoubtTrigger.UNKNOWN_COMMAND)

    @staticmethod
    def inventory(state: "GameState") -> CommandResult:
        if not state.inventory:
            return CommandResult(narration=["You are carrying nothing."])
        return CommandResult(
            narration=["You are carrying:", *(f"- {item}" for item in state.inventory)]
        )
