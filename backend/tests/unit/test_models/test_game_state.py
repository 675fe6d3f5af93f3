"""Unit tests for the game state models.

Tests cover:
- GameState defaults and validation
- Partial updates through GameStateUpdate
- Inventory uniqueness
"""

import pytest
from pydantic import ValidationError

from mansion.models.game import GameState, GameStateUpdate, PuzzleState, SessionState


class TestGameState:
    """Tests for GameState."""

    def test_defaults(self) -> None:
        state = GameState()

        assert state.current_room_id == "entrance"
        assert state.inventory == []
        assert state.puzzle == PuzzleState()
        assert state.doubt_phase == 0
        assert state.ai_help_enabled is False

    def test_rejects_unknown_room(self) -> None:
        with pytest.raises(ValidationError):
            GameState(current_room_id="attic")

    @pytest.mark.parametrize("phase", [-1, 4])
    def test_rejects_out_of_range_phase(self, phase) -> None:
        with pytest.raises(ValidationError):
            GameState(doubt_phase=phase)

    def test_assignment_is_validated(self) -> None:
        state = GameState()

        with pytest.raises(ValidationError):
            state.doubt_phase = 7

    def test_inventory_deduplicated(self) -> None:
        state = GameState(inventory=["brass key", "lint", "brass key"])

        assert state.inventory == ["brass key", "lint"]


class TestGameStateUpdate:
    """Tests for partial updates."""

    def test_empty_update(self) -> None:
        assert GameStateUpdate().is_empty()
        assert not GameStateUpdate(doubt_phase=1).is_empty()

    def test_only_set_fields_apply(self) -> None:
        state = GameState(ai_help_enabled=True, inventory=["lint"])

        state.apply_updates(GameStateUpdate(current_room_id="main"))

        assert state.current_room_id == "main"
        assert state.ai_help_enabled is True
        assert state.inventory == ["lint"]

    def test_update_values_are_copied(self) -> None:
        puzzle = PuzzleState(solved=True, drawer_unlocked=True)
        update = GameStateUpdate(puzzle=puzzle, inventory=["brass key"])
        state = GameState()

        state.apply_updates(update)
        update.inventory.append("lint")

        assert state.inventory == ["brass key"]
        assert state.puzzle is not puzzle
        assert state.puzzle.solved is True

    def test_invalid_update_rejected_on_apply(self) -> None:
        state = GameState()

        with pytest.raises(ValidationError):
            state.apply_updates(GameStateUpdate(doubt_phase=5))


def test_session_defaults() -> None:
    session = SessionState()

    assert session.ended is False
    assert session.has_seen_main_intro is False
    assert session.command_count == 0
    assert session.last_doubt_line is None
