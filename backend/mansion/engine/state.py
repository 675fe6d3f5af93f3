"""
Game session state management.

GameStateManager pairs one player's durable GameState (owned by a
StateStore) with the ephemeral SessionState of a single play session.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from mansion.engine.store import StateStoreError
from mansion.models.game import GameState, GameStateUpdate, SessionState
from mansion.models.world import MAIN_ROOM

if TYPE_CHECKING:
    from mansion.engine.protocols import StateStore
    from mansion.models.world import Room, WorldData

logger = logging.getLogger(__name__)


class GameStateManager:
    """Manages game state for one play session.

    Attributes:
        session_id: Unique identifier for this session
        world_id: ID of the loaded world
        player_id: Key of the player's record in the store
        created_at: When the session was created
        world_data: Loaded world data

    Example:
        >>> manager = GameStateManager(world, InMemoryStateStore(), "alice")
        >>> manager.get_state().current_room_id
        'entrance'
    """

    def __init__(
        self,
        world_data: "WorldData",
        store: "StateStore",
        player_id: str,
        world_id: str = "",
    ):
        """Start a session, loading (or creating) the player's saved state.

        Args:
            world_data: Loaded world data
            store: Durable state store
            player_id: Player whose state is loaded
            world_id: World identifier, used for log file placement

        Raises:
            StateStoreError: If the saved state cannot be read
        """
        self.session_id = str(uuid.uuid4())
        self.world_id = world_id
        self.player_id = player_id
        self.created_at = datetime.now()
        self.world_data = world_data
        self.store = store

        self._state: GameState = store.ensure(player_id)
        # A player resuming in the main room has already had its intro
        self._session = SessionState(
            has_seen_main_intro=self._state.current_room_id == MAIN_ROOM
        )

    def get_state(self) -> GameState:
        return self._state

    def get_session(self) -> SessionState:
        return self._session

    def get_current_room(self) -> "Room":
        return self.world_data.rooms[self._state.current_room_id]

    def apply_updates(self, updates: GameStateUpdate | None) -> str | None:
        """Apply a transition's delta locally and persist it.

        The local state is updated even when persisting fails, so play
        continues on the in-session copy.

        Args:
            updates: Delta returned by the engine, if any

        Returns:
            A "Save warning" narration line if the store failed, else None
        """
        if updates is None or updates.is_empty():
            return None

        self._state.apply_updates(updates)
        try:
            self.store.save(self.player_id, updates)
        except StateStoreError as e:
            logger.warning(f"[{self.session_id}] Save failed for {self.player_id}: {e}")
            return f"Save warning: {e}"

        logger.info(
            f"[{self.session_id}] Saved {sorted(updates.model_fields_set)} for {self.player_id}"
        )
        return None
