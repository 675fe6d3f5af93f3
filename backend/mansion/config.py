"""
Configuration - paths and defaults read from the environment
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# backend/mansion/config.py -> project root
PROJECT_ROOT = Path(__file__).parent.parent.parent

DEFAULT_WORLD = "montes-mansion"


def get_worlds_dir() -> Path:
    """Directory holding one folder per world"""
    return Path(os.getenv("MANSION_WORLDS_DIR", PROJECT_ROOT / "worlds"))


def get_default_world() -> str:
    """World loaded when a request does not name one"""
    return os.getenv("MANSION_WORLD", DEFAULT_WORLD)


def get_state_dir() -> Path | None:
    """Directory for JSON save files, or None to keep state in memory"""
    state_dir = os.getenv("MANSION_STATE_DIR")
    return Path(state_dir) if state_dir else None


def get_logs_dir() -> Path:
    """Directory for session and CLI logs"""
    return Path(os.getenv("MANSION_LOGS_DIR", PROJECT_ROOT / "logs"))
