"""
Examine handler for the mansion engine.

This handler processes LOOK, EXAMINE and MMM_ROOM. All are read-only:
phrasing depends on the current room and the puzzle flags.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mansion.engine.rooms import describe_room, describe_room_debug
from mansion.models.command import CommandKind, ExamineTarget
from mansion.models.game import CommandResult
from mansion.models.world import MAIN_ROOM

if TYPE_CHECKING:
    from mansion.models.command import ParsedCommand
    from mansion.models.game import GameState, PuzzleState, SessionState
    from mansion.models.world import WorldData

NOT_HERE = "There's nothing like that here."


class ExamineHandler:
    """Handles LOOK, EXAMINE and MMM_ROOM commands.

    Only `examine room` works everywhere; desk, drawer, mirror and table
    exist in the main room alone.
    """

    def __init__(self, world: "WorldData"):
        self.world = world

    def handle(
        self,
        command: "ParsedCommand",
        state: "GameState",
        session: "SessionState",
    ) -> CommandResult:
        room = self.world.rooms[state.current_room_id]

        if command.kind == CommandKind.MMM_ROOM:
            return CommandResult(narration=describe_room_debug(room))

        if command.kind == CommandKind.LOOK or command.target == ExamineTarget.ROOM:
            return CommandResult(narration=describe_room(room))

        if command.target is None:
            return CommandResult(narration=["Examine what?"])

        if state.current_room_id != MAIN_ROOM:
            return CommandResult(narration=[NOT_HERE])

        describers = {
            ExamineTarget.DESK: self._desk,
            ExamineTarget.DRAWER: self._drawer,
            ExamineTarget.MIRROR: self._mirror,
            ExamineTarget.TABLE: self._table,
        }
        return CommandResult(narration=describers[command.target](state.puzzle))

    @staticmethod
    def _desk(puzzle: "PuzzleState") -> list[str]:
        if puzzle.solved and not puzzle.key_taken:
            return ["The desk drawer hangs slightly open now.", "Something glints inside."]
        if puzzle.solved:
            return ["The desk is quiet and empty now."]
        return [
            "The desk is old but well-kept.",
            "A drawer is set into it, locked by a small code panel.",
        ]

    @staticmethod
    def _drawer(puzzle: "PuzzleState") -> list[str]:
        if not puzzle.drawer_unlocked:
            return ["The drawer is locked.", "A small code panel waits for four digits."]
        if not puzzle.key_taken:
            return ["The drawer can be opened."]
        return ["The drawer is empty."]

    @staticmethod
    def _mirror(puzzle: "PuzzleState") -> list[str]:
        if puzzle.solved:
            return ["The mirror looks normal now.", "The scratches are easier to notice."]
        return ["The mirror reflects the room.", "Something about it feels watched."]

    @staticmethod
    def _table(puzzle: "PuzzleState") -> list[str]:
        if puzzle.solved:
            return ["The table seems unchanged.", "Only you feel different."]
        return ["Dust lies across the table.", "It has not been used in a long time."]
