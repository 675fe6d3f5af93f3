"""
Game API endpoints - Handle player actions and game state
"""

import asyncio
import logging
import random
from typing import NamedTuple

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from mansion.config import get_default_world, get_state_dir
from mansion.engine.processor import TurnProcessor
from mansion.engine.protocols import StateStore
from mansion.engine.state import GameStateManager
from mansion.engine.store import InMemoryStateStore, JsonFileStateStore, StateStoreError
from mansion.engine.world import WorldDataError, WorldLoader
from mansion.llm.reinterpreter import ReinterpreterAI
from mansion.llm.session_logger import close_session_logger
from mansion.models.game import ActionRequest, GameState, SessionState, TurnResponse

logger = logging.getLogger(__name__)

router = APIRouter()


class GameSession(NamedTuple):
    """A live session: its processor plus the lock serializing its submissions."""

    processor: TurnProcessor
    lock: asyncio.Lock


# In-memory game sessions, keyed by session id
game_sessions: dict[str, GameSession] = {}

_store: StateStore | None = None


def get_store() -> StateStore:
    """Get the state store, a JSON directory if MANSION_STATE_DIR is set."""
    global _store
    if _store is None:
        state_dir = get_state_dir()
        _store = JsonFileStateStore(state_dir) if state_dir else InMemoryStateStore()
        logger.info(f"Using {type(_store).__name__} for game state")
    return _store


class NewGameRequest(BaseModel):
    """Request to start a new game"""

    player_id: str
    world_id: str | None = None  # Defaults to MANSION_WORLD
    seed: int | None = None  # Seed for reproducible narration choices


class NewGameResponse(BaseModel):
    """Response after starting a new game"""

    session_id: str
    narration: list[str]
    doubt_line: str | None = None
    state: GameState


@router.post("/new", response_model=NewGameResponse)
async def new_game(request: NewGameRequest):
    """Start a new game session"""
    world_id = request.world_id or get_default_world()
    try:
        world = WorldLoader().load_world(world_id)
        manager = GameStateManager(world, get_store(), request.player_id, world_id)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=f"World '{world_id}' not found")
    except (WorldDataError, StateStoreError) as e:
        logger.error(f"Cannot start game in '{world_id}': {e}")
        raise HTTPException(status_code=503, detail=str(e))

    processor = TurnProcessor(
        manager,
        reinterpreter=ReinterpreterAI(session_id=manager.session_id),
        rng=random.Random(request.seed),
        log_turns=True,
    )
    game_sessions[manager.session_id] = GameSession(processor=processor, lock=asyncio.Lock())

    opening = processor.start()
    return NewGameResponse(
        session_id=manager.session_id,
        narration=opening.narration,
        doubt_line=opening.doubt_line,
        state=opening.state,
    )


@router.post("/action", response_model=TurnResponse)
async def process_action(request: ActionRequest):
    """Process a player action and return the turn's narration"""
    if request.session_id not in game_sessions:
        raise HTTPException(status_code=404, detail="Game session not found")

    session = game_sessions[request.session_id]
    async with session.lock:
        response = await session.processor.process(request.action)

    if response.session_ended:
        # Ended sessions answer nothing but SESSION ENDED; drop them
        game_sessions.pop(request.session_id, None)
        close_session_logger(request.session_id)
        logger.info(f"[{request.session_id}] Session ended and released")

    return response


@router.get("/state/{session_id}")
async def get_state(session_id: str):
    """Get current game state"""
    if session_id not in game_sessions:
        raise HTTPException(status_code=404, detail="Game session not found")

    manager = game_sessions[session_id].processor.state_manager
    return {"state": manager.get_state()}


class DebugResponse(BaseModel):
    """Session internals for troubleshooting"""

    session_id: str
    player_id: str
    world_id: str
    room_name: str
    state: GameState
    session: SessionState


@router.get("/debug/{session_id}", response_model=DebugResponse)
async def debug_session(session_id: str):
    """Get the persistent state together with the ephemeral session flags."""
    if session_id not in game_sessions:
        raise HTTPException(status_code=404, detail="Game session not found")

    manager = game_sessions[session_id].processor.state_manager
    return DebugResponse(
        session_id=session_id,
        player_id=manager.player_id,
        world_id=manager.world_id,
        room_name=manager.get_current_room().name,
        state=manager.get_state(),
        session=manager.get_session(),
    )
