"""Unit tests for PuzzleHandler.

Tests cover:
- search reveals the code only in the main room and only until solved
- enter code: wrong room, wrong code, right code, already solved
- open drawer: locked, open with key, empty, idempotence
- take key: not visible, success, already taken
"""

import pytest

from mansion.engine.handlers.puzzle import KEY_ITEM, SOLUTION_CODE, PuzzleHandler
from mansion.models.game import GameState, PuzzleState
from mansion.models.trigger import DoubtTrigger


class TestPuzzleHandler:
    """Tests for PuzzleHandler."""

    @pytest.fixture
    def handler(self) -> PuzzleHandler:
        return PuzzleHandler()

    # Search

    def test_search_outside_main(self, handler, parser, game_state, session_state) -> None:
        result = handler.handle(parser.parse("search"), game_state, session_state)

        assert result.narration == ["You search around but find nothing useful."]

    def test_search_reveals_code(self, handler, parser, state_in_main, session_state) -> None:
        result = handler.handle(parser.parse("search room"), state_in_main, session_state)

        assert result.narration == [
            "You search the room carefully.",
            "On the mirror's edge, faint scratches form four numbers: 4 3 1 2",
        ]
        assert result.updates is None
        assert result.trigger is None

    def test_search_after_solved(self, handler, parser, solved_state, session_state) -> None:
        result = handler.handle(parser.parse("search"), solved_state, session_state)

        assert result.narration == ["You search again.", "Nothing else seems important."]

    # Enter code

    def test_code_outside_main(self, handler, parser, game_state, session_state) -> None:
        result = handler.handle(parser.parse("enter code 4312"), game_state, session_state)

        assert result.narration == ["There's nowhere to enter a code here."]
        assert result.updates is None

    def test_wrong_code(self, handler, parser, state_in_main, session_state) -> None:
        result = handler.handle(parser.parse("enter code 1234"), state_in_main, session_state)

        assert result.narration == ["The panel buzzes softly.", "Nothing opens."]
        assert result.updates is None
        assert result.trigger is None

    def test_right_code(self, handler, parser, state_in_main, session_state) -> None:
        result = handler.handle(
            parser.parse(f"use code {SOLUTION_CODE}"), state_in_main, session_state
        )

        assert result.narration == ["The panel clicks.", "The drawer unlocks."]
        assert result.updates.puzzle == PuzzleState(solved=True, drawer_unlocked=True)
        assert result.updates.doubt_phase == 2
        assert result.trigger == DoubtTrigger.SOLVED_CODE

    def test_code_after_solved(self, handler, parser, solved_state, session_state) -> None:
        result = handler.handle(parser.parse("enter code 4312"), solved_state, session_state)

        assert result.narration == ["The panel is already quiet."]
        assert result.updates is None

    # Open drawer

    def test_open_drawer_outside_main(self, handler, parser, game_state, session_state) -> None:
        result = handler.handle(parser.parse("open drawer"), game_state, session_state)

        assert result.narration == ["There's no drawer here."]

    def test_open_locked_drawer(self, handler, parser, state_in_main, session_state) -> None:
        result = handler.handle(parser.parse("open drawer"), state_in_main, session_state)

        assert result.narration == ["It will not open."]
        assert result.trigger is None

    def test_open_unlocked_drawer(self, handler, parser, solved_state, session_state) -> None:
        result = handler.handle(parser.parse("open drawer"), solved_state, session_state)

        assert result.narration == ["The drawer opens.", f"Inside is a {KEY_ITEM}."]
        assert result.updates is None
        assert result.trigger == DoubtTrigger.OPENED_DRAWER

    def test_open_drawer_is_idempotent(self, handler, parser, solved_state, session_state) -> None:
        command = parser.parse("open drawer")

        first = handler.handle(command, solved_state, session_state)
        second = handler.handle(command, solved_state, session_state)

        assert first == second

    def test_open_empty_drawer(self, handler, parser, session_state) -> None:
        state = GameState(
            current_room_id="main",
            inventory=[KEY_ITEM],
            puzzle=PuzzleState(solved=True, drawer_unlocked=True, key_taken=True),
        )

        result = handler.handle(parser.parse("open drawer"), state, session_state)

        assert result.narration == ["The drawer is empty."]
        assert result.trigger is None

    # Take key

    def test_take_key_before_unlock(self, handler, parser, state_in_main, session_state) -> None:
        result = handler.handle(parser.parse("take key"), state_in_main, session_state)

        assert result.narration == ["You don't see a key to take."]

    def test_take_key_outside_main(self, handler, parser, session_state) -> None:
        state = GameState(puzzle=PuzzleState(solved=True, drawer_unlocked=True))

        result = handler.handle(parser.parse("grab key"), state, session_state)

        assert result.narration == ["You don't see a key to take."]

    def test_take_key(self, handler, parser, solved_state, session_state) -> None:
        result = handler.handle(parser.parse("take key"), solved_state, session_state)

        assert result.narration == [f"You take the {KEY_ITEM}."]
        assert result.updates.inventory == [KEY_ITEM]
        assert result.updates.puzzle.key_taken is True
        assert result.updates.puzzle.drawer_unlocked is True
        assert result.updates.doubt_phase == 3
        assert result.trigger == DoubtTrigger.TOOK_KEY

    def test_take_key_keeps_inventory_unique(self, handler, parser, session_state) -> None:
        state = GameState(
            current_room_id="main",
            inventory=[KEY_ITEM],
            puzzle=PuzzleState(solved=True, drawer_unlocked=True),
        )

        result = handler.handle(parser.parse("take key"), state, session_state)

        assert result.updates.inventory == [KEY_ITEM]

    def test_take_key_twice(self, handler, parser, session_state) -> None:
        state = GameState(
            current_room_id="main",
            inventory=[KEY_ITEM],
            puzzle=PuzzleState(solved=True, drawer_unlocked=True, key_taken=True),
        )

        result = handler.handle(parser.parse("take key"), state, session_state)

        assert result.narration == [f"You already have the {KEY_ITEM}."]
        assert result.updates is None
