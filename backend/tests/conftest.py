"""
Shared pytest fixtures for Mystery Mansion backend tests.

This module provides:
- world_data: Both rooms of the mansion, built in memory
- game_state / session_state: Fresh state at the entrance
- state_in_main / solved_state: State at later points of the puzzle
- rng: Seeded random source for deterministic narration choices
- mock_reinterpreter: Scriptable Reinterpreter for typo flows
- Custom markers for test categorization
"""

from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

# Add backend to path for imports
backend_path = Path(__file__).parent.parent
if str(backend_path) not in sys.path:
    sys.path.insert(0, str(backend_path))

from mansion.engine.parser import CommandParser  # noqa: E402
from mansion.models.game import GameState, PuzzleState, SessionState  # noqa: E402
from mansion.models.world import Room, WorldData  # noqa: E402

if TYPE_CHECKING:
    from tests.mocks.reinterpreter import MockReinterpreter


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


# =============================================================================
# World Data Fixtures
# =============================================================================


@pytest.fixture
def rooms() -> dict[str, Room]:
    """The two mansion rooms.

    Layout:
        [entrance] --inside--> [main]
        [entrance] <---out---- [main]
    """
    return {
        "entrance": Room(
            id="entrance",
            name="Mansion Entrance",
            description="You stand before a creaking door. A dim light spills from inside.",
            exits={"inside": "main"},
        ),
        "main": Room(
            id="main",
            name="Main Room",
            description="Dusty portraits stare back. A cold draft whispers toward the exit.",
            exits={"out": "entrance"},
        ),
    }


@pytest.fixture
def world_data(rooms: dict[str, Room]) -> WorldData:
    """Create complete WorldData for testing."""
    return WorldData(name="Montes Mystery Mansion", starting_room="entrance", rooms=rooms)


@pytest.fixture
def world_dir(tmp_path: Path) -> Path:
    """Write a valid world to disk and return the worlds directory."""
    world_path = tmp_path / "worlds" / "test-mansion"
    world_path.mkdir(parents=True)
    (world_path / "world.yaml").write_text(
        "name: Test Mansion\nstarting_room: entrance\n", encoding="utf-8"
    )
    (world_path / "rooms.yaml").write_text(
        "entrance:\n"
        "  name: Mansion Entrance\n"
        "  description: A creaking door.\n"
        "  exits:\n"
        "    INSIDE: main\n"
        "main:\n"
        "  name: Main Room\n"
        "  description: Dusty portraits.\n"
        "  exits:\n"
        "    out: entrance\n",
        encoding="utf-8",
    )
    return tmp_path / "worlds"


# =============================================================================
# Game State Fixtures
# =============================================================================


@pytest.fixture
def game_state() -> GameState:
    """A fresh GameState at the entrance."""
    return GameState()


@pytest.fixture
def session_state() -> SessionState:
    """A fresh SessionState."""
    return SessionState()


@pytest.fixture
def state_in_main() -> GameState:
    """Player has entered the main room but not solved anything."""
    return GameState(current_room_id="main", doubt_phase=1)


@pytest.fixture
def solved_state() -> GameState:
    """Player has entered the correct code; the key is still in the drawer."""
    return GameState(
        current_room_id="main",
        doubt_phase=2,
        puzzle=PuzzleState(solved=True, drawer_unlocked=True),
    )


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def parser() -> CommandParser:
    return CommandParser()


# =============================================================================
# Reinterpreter Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_reinterpreter() -> "MockReinterpreter":
    """Create a mock reinterpreter that never has a suggestion."""
    from tests.mocks.reinterpreter import MockReinterpreter

    return MockReinterpreter()


@pytest.fixture
def mock_reinterpreter_with_responses() -> callable:
    """Factory fixture to create a mock reinterpreter with custom answers.

    Usage:
        def test_something(mock_reinterpreter_with_responses):
            reinterpreter = mock_reinterpreter_with_responses({
                "exmine desk": ReinterpretResult(command="examine desk"),
            })
    """
    from tests.mocks.reinterpreter import MockReinterpreter

    def _factory(responses) -> MockReinterpreter:
        return MockReinterpreter(responses=responses)

    return _factory
