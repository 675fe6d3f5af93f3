"""Unit tests for the world schema models."""

import pytest
from pydantic import ValidationError

from mansion.models.world import Room, WorldData


class TestRoom:
    """Tests for Room."""

    def test_exit_directions_lowercased(self) -> None:
        room = Room(id="entrance", name="Entrance", exits={"INSIDE": "main"})

        assert room.exits == {"inside": "main"}

    def test_unknown_destination_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Room(id="entrance", name="Entrance", exits={"north": "attic"})

    def test_rooms_are_frozen(self) -> None:
        room = Room(id="main", name="Main Room")

        with pytest.raises(ValidationError):
            room.name = "Other"

    def test_default_description(self) -> None:
        assert Room(id="main", name="Main Room").description == "No description."


def test_get_room(world_data: WorldData) -> None:
    assert world_data.get_room("main").name == "Main Room"
    assert world_data.get_room("attic") is None
