"""
Mystery Mansion Backend - FastAPI Application Entry Point
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mansion import __version__
from mansion.api import game

app = FastAPI(
    title="Mystery Mansion",
    description="Two-room text adventure with a doubting antagonist",
    version=__version__,
)

# Configure CORS for a local terminal frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://127.0.0.1:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(game.router, prefix="/api/game", tags=["game"])


@app.get("/")
async def root():
    """Health check endpoint"""
    return {"status": "ok", "name": "Mystery Mansion", "version": __version__}


@app.get("/api/worlds")
async def list_worlds():
    """List available game worlds"""
    from mansion.engine.world import WorldLoader

    loader = WorldLoader()
    worlds = loader.list_worlds()
    return {"worlds": worlds}
