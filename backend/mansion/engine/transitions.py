"""
Game transition engine.

Routes a ParsedCommand to the handler for its kind. The engine is a pure
function of (GameState, ParsedCommand) apart from the ephemeral
SessionState bookkeeping, and it answers every command kind with narration
rather than an exception.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from mansion.engine.handlers import (
    ExamineHandler,
    MetaHandler,
    MovementHandler,
    PuzzleHandler,
)
from mansion.engine.handlers.meta import SESSION_ENDED
from mansion.models.command import CommandKind
from mansion.models.game import CommandResult

if TYPE_CHECKING:
    from mansion.engine.protocols import CommandHandler
    from mansion.models.command import ParsedCommand
    from mansion.models.game import GameState, SessionState
    from mansion.models.world import WorldData

logger = logging.getLogger(__name__)


class GameEngine:
    """Applies parsed commands to game state.

    Example:
        >>> engine = GameEngine(world, random.Random(7))
        >>> result = engine.apply(GameState(), parser.parse("enter"), SessionState())
        >>> result.updates.current_room_id
        'main'
    """

    def __init__(self, world: "WorldData", rng: random.Random | None = None):
        """Initialize the engine.

        Args:
            world: Loaded world data (both rooms present)
            rng: Random source for randomized narration; a fresh one if omitted
        """
        self.world = world
        self.rng = rng or random.Random()

        movement = MovementHandler(world, self.rng)
        examine = ExamineHandler(world)
        puzzle = PuzzleHandler()
        meta = MetaHandler()

        self._handlers: dict[CommandKind, "CommandHandler"] = {
            CommandKind.MOVE: movement,
            CommandKind.MMM_EXIT: movement,
            CommandKind.LOOK: examine,
            CommandKind.EXAMINE: examine,
            CommandKind.MMM_ROOM: examine,
            CommandKind.SEARCH: puzzle,
            CommandKind.OPEN_DRAWER: puzzle,
            CommandKind.ENTER_CODE: puzzle,
            CommandKind.TAKE_KEY: puzzle,
        }
        self._fallback: "CommandHandler" = meta

    def apply(
        self,
        state: "GameState",
        command: "ParsedCommand",
        session: "SessionState",
    ) -> CommandResult:
        """Apply one command.

        Args:
            state: Current game state; not modified
            command: The parsed command
            session: Ephemeral session data; quit, the main-room intro
                flag and the last blocked-exit line are recorded here

        Returns:
            CommandResult with narration, an optional delta and trigger
        """
        if session.ended:
            return CommandResult(narration=[SESSION_ENDED])

        handler = self._handlers.get(command.kind, self._fallback)
        result = handler.handle(command, state, session)

        logger.debug(
            f"Applied {command.kind.value} in {state.current_room_id}: "
            f"trigger={result.trigger.value if result.trigger else None}, "
            f"updates={sorted(result.updates.model_fields_set) if result.updates else []}"
        )
        return result
