"""
Puzzle handler for the mansion engine.

This handler processes the drawer puzzle: SEARCH reveals the code,
ENTER_CODE unlocks the drawer, OPEN_DRAWER shows the key and TAKE_KEY
puts it in the inventory.

Puzzle flow:
    search -> "4 3 1 2" -> enter code 4312 -> open drawer -> take key
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mansion.engine.doubt import advance_phase
from mansion.models.command import CommandKind
from mansion.models.game import CommandResult, GameStateUpdate
from mansion.models.trigger import DoubtTrigger
from mansion.models.world import MAIN_ROOM

if TYPE_CHECKING:
    from mansion.models.command import ParsedCommand
    from mansion.models.game import GameState, SessionState

SOLUTION_CODE = "4312"
KEY_ITEM = "brass key"


class PuzzleHandler:
    """Handles SEARCH, OPEN_DRAWER, ENTER_CODE and TAKE_KEY.

    Discovering the code is never recorded: searching before the puzzle
    is solved always reveals it again.

    Example:
        >>> handler = PuzzleHandler()
        >>> result = handler.handle(enter_code_4312, state_in_main, session)
        >>> result.updates.puzzle.drawer_unlocked
        True
    """

    def handle(
        self,
        command: "ParsedCommand",
        state: "GameState",
        session: "SessionState",
    ) -> CommandResult:
        if command.kind == CommandKind.SEARCH:
            return self.search(state)
        if command.kind == CommandKind.OPEN_DRAWER:
            return self.open_drawer(state)
        if command.kind == CommandKind.ENTER_CODE:
            return self.enter_code(state, command.code or "")
        return self.take_key(state)

    def search(self, state: "GameState") -> CommandResult:
        if state.current_room_id != MAIN_ROOM:
            return CommandResult(narration=["You search around but find nothing useful."])

        if not state.puzzle.solved:
            digits = " ".join(SOLUTION_CODE)
            return CommandResult(
                narration=[
                    "You search the room carefully.",
                    f"On the mirror's edge, faint scratches form four numbers: {digits}",
                ]
            )

        return CommandResult(narration=["You search again.", "Nothing else seems important."])

    def open_drawer(self, state: "GameState") -> CommandResult:
        if state.current_room_id != MAIN_ROOM:
            return CommandResult(narration=["There's no drawer here."])
        if not state.puzzle.drawer_unlocked:
            return CommandResult(narration=["It will not open."])
        if state.puzzle.key_taken:
            return CommandResult(narration=["The drawer is empty."])
        # The key is shown, not taken
        return CommandResult(
            narration=["The drawer opens.", f"Inside is a {KEY_ITEM}."],
            trigger=DoubtTrigger.OPENED_DRAWER,
        )

    def enter_code(self, state: "GameState", code: str) -> CommandResult:
        if state.current_room_id != MAIN_ROOM:
            return CommandResult(narration=["There's nowhere to enter a code here."])
        if state.puzzle.drawer_unlocked:
            return CommandResult(narration=["The panel is already quiet."])
        if code != SOLUTION_CODE:
            return CommandResult(narration=["The panel buzzes softly.", "Nothing opens."])

        puzzle = state.puzzle.model_copy(update={"drawer_unlocked": True, "solved": True})
        return CommandResult(
            narration=["The panel clicks.", "The drawer unlocks."],
            updates=GameStateUpdate(
                puzzle=puzzle,
                doubt_phase=advance_phase(state.doubt_phase, DoubtTrigger.SOLVED_CODE),
            ),
            trigger=DoubtTrigger.SOLVED_CODE,
        )

    def take_key(self, state: "GameState") -> CommandResult:
        if state.current_room_id != MAIN_ROOM or not state.puzzle.drawer_unlocked:
            return CommandResult(narration=["You don't see a key to take."])
        if state.puzzle.key_taken:
            return CommandResult(narration=[f"You already have the {KEY_ITEM}."])

        inventory = list(state.inventory)
        if KEY_ITEM not in inventory:
            inventory.append(KEY_ITEM)

        return CommandResult(
            narration=[f"You take the {KEY_ITEM}."],
            updates=GameStateUpdate(
                inventory=inventory,
                puzzle=state.puzzle.model_copy(update={"key_taken": True}),
                doubt_phase=advance_phase(state.doubt_phase, DoubtTrigger.TOOK_KEY),
            ),
            trigger=DoubtTrigger.TOOK_KEY,
        )
