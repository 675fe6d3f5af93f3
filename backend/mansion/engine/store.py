"""
State stores - durable per-player GameState.

Two implementations of the StateStore protocol:
- InMemoryStateStore: process-local, for tests and throwaway sessions
- JsonFileStateStore: one JSON document per player in a data directory
"""

from __future__ import annotations

import hashlib
import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from mansion.models.game import GameState, GameStateUpdate

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]+")


class StateStoreError(RuntimeError):
    """Stored state could not be read or written"""


class InMemoryStateStore:
    """Keeps game state in a dict keyed by player id."""

    def __init__(self) -> None:
        self._states: dict[str, GameState] = {}

    def ensure(self, player_id: str) -> GameState:
        if player_id not in self._states:
            logger.info(f"Creating default game state for player {player_id}")
            self._states[player_id] = GameState()
        return self._states[player_id].model_copy(deep=True)

    def save(self, player_id: str, updates: GameStateUpdate) -> None:
        state = self._states.setdefault(player_id, GameState())
        state.apply_updates(updates)


class JsonFileStateStore:
    """Stores each player's state as ``<data_dir>/<safe_id>-<hash>.json``.

    The hash is taken over the raw player id, so ids that clean up to the
    same readable prefix still get separate files.
    """

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, player_id: str) -> Path:
        safe_id = _UNSAFE_CHARS.sub("-", player_id).strip("-.") or "player"
        digest = hashlib.sha256(player_id.encode()).hexdigest()[:12]
        return self.data_dir / f"{safe_id}-{digest}.json"

    def ensure(self, player_id: str) -> GameState:
        path = self.path_for(player_id)
        if not path.is_file():
            logger.info(f"Creating default game state at {path}")
            state = GameState()
            self._write(path, state)
            return state
        return self._read(path)

    def save(self, player_id: str, updates: GameStateUpdate) -> None:
        path = self.path_for(player_id)
        state = self._read(path) if path.is_file() else GameState()
        state.apply_updates(updates)
        self._write(path, state)
        logger.debug(f"Saved {sorted(updates.model_fields_set)} to {path}")

    def _read(self, path: Path) -> GameState:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StateStoreError(f"Could not read save file {path}: {e}") from e
        if not isinstance(data, dict):
            raise StateStoreError(f"Save file {path} is not a JSON object")
        data.pop("updated_at", None)
        try:
            return GameState.model_validate(data)
        except ValidationError as e:
            raise StateStoreError(f"Save file {path} is malformed: {e}") from e

    def _write(self, path: Path, state: GameState) -> None:
        document = state.model_dump(mode="json")
        document["updated_at"] = datetime.now(timezone.utc).isoformat()
        try:
            path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        except OSError as e:
            raise StateStoreError(f"Could not write save file {path}: {e}") from e
