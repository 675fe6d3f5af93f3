"""Pydantic models for the mansion engine"""

from mansion.models.world import Room, RoomId, WorldData, ENTRANCE, MAIN_ROOM
from mansion.models.game import (
    PuzzleState,
    GameState,
    GameStateUpdate,
    SessionState,
    CommandResult,
    ActionRequest,
    TurnResponse,
)
from mansion.models.command import CommandKind, Direction, ExamineTarget, ParsedCommand
from mansion.models.trigger import DoubtTrigger
from mansion.models.reinterpret import (
    ReinterpretError,
    ReinterpretRequest,
    ReinterpretResult,
)

__all__ = [
    # World models
    "Room",
    "RoomId",
    "WorldData",
    "ENTRANCE",
    "MAIN_ROOM",
    # Game models
    "PuzzleState",
    "GameState",
    "GameStateUpdate",
    "SessionState",
    "CommandResult",
    "ActionRequest",
    "TurnResponse",
    # Command models
    "CommandKind",
    "Direction",
    "ExamineTarget",
    "ParsedCommand",
    "DoubtTrigger",
    # Reinterpretation models
    "ReinterpretError",
    "ReinterpretRequest",
    "ReinterpretResult",
]
