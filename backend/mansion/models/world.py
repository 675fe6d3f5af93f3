"""
World schema models - Pydantic models for the YAML world definition
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

RoomId = Literal["entrance", "main"]

ENTRANCE: RoomId = "entrance"
MAIN_ROOM: RoomId = "main"
ROOM_IDS: tuple[RoomId, ...] = (ENTRANCE, MAIN_ROOM)


class Room(BaseModel):
    """Room definition from rooms.yaml"""
    id: RoomId
    name: str
    description: str = "No description."
    exits: dict[str, RoomId] = Field(default_factory=dict)  # Maps direction to destination room

    model_config = {"frozen": True}

    @field_validator("exits", mode="before")
    @classmethod
    def lowercase_directions(cls, value: object) -> object:
        if not isinstance(value, dict):
            return value
        return {str(direction).lower(): target for direction, target in value.items()}


class WorldData(BaseModel):
    """Complete world data loaded from YAML"""
    name: str
    starting_room: RoomId = ENTRANCE
    rooms: dict[RoomId, Room] = Field(default_factory=dict)

    def get_room(self, room_id: str) -> Room | None:
        """Get a room by ID"""
        return self.rooms.get(room_id)  # type: ignore[call-overload]
