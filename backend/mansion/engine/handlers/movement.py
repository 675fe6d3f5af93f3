"""
Movement handler for the mansion engine.

This handler processes MOVE and MMM_EXIT commands. Both route through the
same transition; MMM_EXIT only differs in what it says at the entrance.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from mansion.engine.doubt import advance_phase, pick_line
from mansion.engine.rooms import BLOCKED_DIRECTIONS, describe_room
from mansion.models.command import CommandKind, Direction
from mansion.models.game import CommandResult, GameStateUpdate
from mansion.models.trigger import DoubtTrigger
from mansion.models.world import ENTRANCE, MAIN_ROOM

if TYPE_CHECKING:
    from mansion.models.command import ParsedCommand
    from mansion.models.game import GameState, SessionState
    from mansion.models.world import WorldData

BLOCKED_EXIT_LINES: list[str] = [
    "That way is sealed for now.",
    "A hallway waits, but you cannot enter it yet.",
    "Not yet.",
]


class MovementHandler:
    """Handles MOVE and MMM_EXIT commands.

    Rules:
        - north/east/west are permanently blocked
        - south is an alias for out
        - inside/out follow the current room's exit table
        - arriving in the main room advances the doubt phase; the first
          arrival of a session gets the intro description

    Example:
        >>> handler = MovementHandler(world, random.Random(1))
        >>> result = handler.handle(command, state, session)
        >>> result.updates.current_room_id
        'main'
    """

    def __init__(self, world: "WorldData", rng: random.Random):
        """Initialize the movement handler.

        Args:
            world: World data with the room exit tables
            rng: Random source for the blocked-exit lines
        """
        self.world = world
        self.rng = rng

    def handle(
        self,
        command: "ParsedCommand",
        state: "GameState",
        session: "SessionState",
    ) -> CommandResult:
        if command.kind == CommandKind.MMM_EXIT:
            if state.current_room_id == ENTRANCE:
                return CommandResult(
                    narration=["You are already at the entrance. The way is inside."]
                )
            return self.move(Direction.OUT, state, session)

        if command.direction is None:
            return CommandResult(narration=["Choose a direction. Try inside or out."])
        return self.move(command.direction, state, session)

    def move(
        self,
        direction: Direction,
        state: "GameState",
        session: "SessionState",
    ) -> CommandResult:
        """Move the player one step in ``direction``.

        Args:
            direction: Normalized direction
            state: Current game state
            session: Session data; holds the intro flag and the last blocked line

        Returns:
            CommandResult with the new room id in updates on success
        """
        if direction in BLOCKED_DIRECTIONS:
            line = pick_line(self.rng, BLOCKED_EXIT_LINES, session.last_blocked_line)
            session.last_blocked_line = line
            return CommandResult(
                narration=[line],
                trigger=DoubtTrigger.BLOCKED_EXIT_ATTEMPT,
            )

        if direction == Direction.SOUTH:
            direction = Direction.OUT

        current_room = self.world.rooms[state.current_room_id]
        destination_id = current_room.exits.get(direction.value)
        if destination_id is None:
            return CommandResult(
                narration=[
                    "You can't go that way.",
                    'Type "help" to see options or "look" to check exits.',
                ]
            )

        changes: dict = {"current_room_id": destination_id}
        trigger = None
        intro = False

        if destination_id == MAIN_ROOM:
            changes["doubt_phase"] = advance_phase(state.doubt_phase, DoubtTrigger.ENTERED_MAIN)
            trigger = DoubtTrigger.ENTERED_MAIN
            intro = not session.has_seen_main_intro
            session.has_seen_main_intro = True

        destination = self.world.rooms[destination_id]
        return CommandResult(
            narration=[f"You move {direction.value}.", *describe_room(destination, intro=intro)],
            updates=GameStateUpdate(**changes),
            trigger=trigger,
        )
