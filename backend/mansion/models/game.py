"""
Game state models - Pydantic models for game session state
"""

from pydantic import BaseModel, Field, field_validator

from mansion.models.trigger import DoubtTrigger
from mansion.models.world import ENTRANCE, RoomId

MAX_DOUBT_PHASE = 3


# =============================================================================
# Persistent State Models
# =============================================================================

class PuzzleState(BaseModel):
    """Progress on the drawer puzzle"""
    solved: bool = False
    drawer_unlocked: bool = False  # Set together with solved by the correct code
    key_taken: bool = False


class GameStateUpdate(BaseModel):
    """Partial game state emitted by a transition. Only fields that were set are applied."""
    current_room_id: RoomId | None = None
    inventory: list[str] | None = None
    puzzle: PuzzleState | None = None
    doubt_phase: int | None = None
    ai_help_enabled: bool | None = None

    def is_empty(self) -> bool:
        return not self.model_fields_set


class GameState(BaseModel):
    """Durable per-player game state"""
    current_room_id: RoomId = ENTRANCE
    inventory: list[str] = Field(default_factory=list)
    puzzle: PuzzleState = Field(default_factory=PuzzleState)
    doubt_phase: int = Field(default=0, ge=0, le=MAX_DOUBT_PHASE)
    ai_help_enabled: bool = False

    model_config = {"validate_assignment": True}

    @field_validator("inventory")
    @classmethod
    def unique_items(cls, value: list[str]) -> list[str]:
        # Keep first occurrence order
        return list(dict.fromkeys(value))

    def apply_updates(self, updates: GameStateUpdate) -> None:
        """Apply a partial update field by field"""
        for field in updates.model_fields_set:
            value = getattr(updates, field)
            if value is None:
                continue
            if isinstance(value, BaseModel):
                value = value.model_copy()
            elif isinstance(value, list):
                value = list(value)
            setattr(self, field, value)


# =============================================================================
# Session Models
# =============================================================================

class SessionState(BaseModel):
    """Ephemeral per-session data, never persisted"""
    ended: bool = False  # Set by quit; all further commands short-circuit
    has_seen_main_intro: bool = False
    last_doubt_line: str | None = None
    last_blocked_line: str | None = None
    command_count: int = 0
    last_whisper_command: int = -10


class CommandResult(BaseModel):
    """Outcome of applying one command to the game state"""
    narration: list[str] = Field(default_factory=list)
    updates: GameStateUpdate | None = None
    trigger: DoubtTrigger | None = None


# =============================================================================
# API Models
# =============================================================================

class ActionRequest(BaseModel):
    """Request to process a player action"""
    session_id: str
    action: str


class TurnResponse(BaseModel):
    """Response from processing one submission"""
    narration: list[str] = Field(default_factory=list)
    doubt_line: str | None = None  # Antagonist commentary to show, if any
    trigger: DoubtTrigger | None = None
    suggestion: str | None = None  # Command suggested by the reinterpreter
    state: GameState
    session_ended: bool = False
