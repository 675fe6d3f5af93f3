"""
World loader - Load and validate YAML world files
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from mansion.config import get_worlds_dir
from mansion.models.world import ROOM_IDS, Room, WorldData

logger = logging.getLogger(__name__)


class WorldDataError(ValueError):
    """World files exist but their content is unusable"""


class MissingRoomError(WorldDataError):
    """A required room is absent from the world files"""


class WorldLoader:
    """Loads game worlds from YAML files"""

    def __init__(self, worlds_dir: str | Path | None = None):
        """Initialize with worlds directory path"""
        self.worlds_dir = Path(worlds_dir) if worlds_dir else get_worlds_dir()

    def list_worlds(self) -> list[dict]:
        """List available worlds with metadata"""
        worlds = []

        if not self.worlds_dir.exists():
            return worlds

        for world_path in sorted(self.worlds_dir.iterdir()):
            world_yaml = world_path / "world.yaml"
            if not world_yaml.exists():
                continue
            try:
                data = self._read_yaml(world_yaml)
            except WorldDataError as e:
                logger.warning(f"Skipping world '{world_path.name}': {e}")
                continue
            worlds.append({
                "id": world_path.name,
                "name": data.get("name", world_path.name),
            })

        return worlds

    def load_world(self, world_id: str) -> WorldData:
        """
        Load a complete world from YAML files.

        Args:
            world_id: The world identifier (folder name in worlds/)

        Returns:
            WorldData with both rooms

        Raises:
            FileNotFoundError: If world doesn't exist
            MissingRoomError: If the entrance or main room is missing
            WorldDataError: If a file cannot be parsed or validated
        """
        world_path = self.worlds_dir / world_id

        if not world_path.exists():
            raise FileNotFoundError(f"World '{world_id}' not found at {world_path}")

        meta = self._read_yaml(world_path / "world.yaml")
        rooms = self._load_rooms(world_path / "rooms.yaml")

        try:
            world = WorldData(
                name=meta.get("name", world_id),
                starting_room=meta.get("starting_room", "entrance"),
                rooms=rooms,
            )
        except ValidationError as e:
            raise WorldDataError(f"World '{world_id}' is invalid: {e}") from e

        logger.info(f"Loaded world '{world_id}' with rooms: {', '.join(world.rooms)}")
        return world

    def _load_rooms(self, path: Path) -> dict[str, Room]:
        """Load rooms.yaml, requiring every fixed room id"""
        data = self._read_yaml(path) if path.exists() else {}

        rooms = {}
        for room_id in ROOM_IDS:
            room_data = data.get(room_id)
            if not isinstance(room_data, dict):
                raise MissingRoomError(
                    f'Room "{room_id}" is missing. Add it to {path} and try again.'
                )
            exits = room_data.get("exits") or {}
            try:
                rooms[room_id] = Room(
                    id=room_id,
                    name=room_data.get("name") or room_id,
                    description=room_data.get("description") or "No description.",
                    # Non-string destinations are dropped, not fatal
                    exits={
                        direction: target
                        for direction, target in exits.items()
                        if isinstance(target, str)
                    } if isinstance(exits, dict) else {},
                )
            except ValidationError as e:
                raise WorldDataError(f'Room "{room_id}" is invalid: {e}') from e

        return rooms

    @staticmethod
    def _read_yaml(path: Path) -> dict:
        if not path.exists():
            raise WorldDataError(f"World file not found: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise WorldDataError(f"Could not parse {path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise WorldDataError(f"Expected a mapping at the top of {path}")
        return data
