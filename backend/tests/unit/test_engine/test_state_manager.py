"""Unit tests for GameStateManager.

Tests cover:
- Loading or creating the player's state
- Resuming in the main room skips the intro
- Updates are applied locally and persisted
- A failing store produces a save warning but keeps the local change
"""

import pytest

from mansion.engine.state import GameStateManager
from mansion.engine.store import InMemoryStateStore, StateStoreError
from mansion.models.game import GameStateUpdate


class FailingStore(InMemoryStateStore):
    """Store whose writes always fail."""

    def save(self, player_id, updates) -> None:
        raise StateStoreError("disk full")


class TestGameStateManager:
    """Tests for GameStateManager."""

    @pytest.fixture
    def store(self) -> InMemoryStateStore:
        return InMemoryStateStore()

    @pytest.fixture
    def manager(self, world_data, store) -> GameStateManager:
        return GameStateManager(world_data, store, "alice", world_id="montes-mansion")

    def test_new_player_starts_at_entrance(self, manager) -> None:
        assert manager.get_state().current_room_id == "entrance"
        assert manager.get_current_room().name == "Mansion Entrance"
        assert manager.get_session().has_seen_main_intro is False
        assert manager.world_id == "montes-mansion"

    def test_session_ids_are_unique(self, world_data, store) -> None:
        first = GameStateManager(world_data, store, "alice")
        second = GameStateManager(world_data, store, "alice")

        assert first.session_id != second.session_id

    def test_resume_in_main_skips_intro(self, world_data, store) -> None:
        store.save("alice", GameStateUpdate(current_room_id="main", doubt_phase=1))

        manager = GameStateManager(world_data, store, "alice")

        assert manager.get_state().current_room_id == "main"
        assert manager.get_session().has_seen_main_intro is True

    def test_apply_updates_persists(self, manager, store) -> None:
        warning = manager.apply_updates(GameStateUpdate(current_room_id="main", doubt_phase=1))

        assert warning is None
        assert manager.get_state().current_room_id == "main"
        assert store.ensure("alice").doubt_phase == 1

    def test_apply_nothing(self, manager) -> None:
        assert manager.apply_updates(None) is None
        assert manager.apply_updates(GameStateUpdate()) is None

    def test_save_warning(self, world_data) -> None:
        manager = GameStateManager(world_data, FailingStore(), "alice")

        warning = manager.apply_updates(GameStateUpdate(ai_help_enabled=True))

        assert warning == "Save warning: disk full"
        assert manager.get_state().ai_help_enabled is True
