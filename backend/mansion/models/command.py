"""
Command models for the mansion engine.

This module defines the structured representation of a player submission
after it has been run through the command grammar.

Key concepts:
    - CommandKind: The closed set of commands the grammar recognizes
    - Direction: Normalized movement directions
    - ExamineTarget: Things that can be examined
    - ParsedCommand: A tagged command with its kind-specific payload

Example:
    >>> command = ParsedCommand(
    ...     kind=CommandKind.ENTER_CODE,
    ...     raw="use code 4312",
    ...     code="4312",
    ... )
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class CommandKind(str, Enum):
    """Kinds of commands recognized by the grammar.

    Categories:
        Movement: MOVE
        Looking: LOOK, EXAMINE, SEARCH
        Puzzle: OPEN_DRAWER, ENTER_CODE, TAKE_KEY
        Meta: HELP, INVENTORY, AI_TOGGLE, QUIT
        Manual (debug namespace): MMM_HELP, MMM_HELP_COMMAND, MMM_ROOM, MMM_EXIT
        Fallback: UNKNOWN
    """

    # Movement
    MOVE = "move"

    # Looking
    LOOK = "look"
    EXAMINE = "examine"
    SEARCH = "search"

    # Puzzle
    OPEN_DRAWER = "open_drawer"
    ENTER_CODE = "enter_code"
    TAKE_KEY = "take_key"

    # Meta
    HELP = "help"
    INVENTORY = "inventory"
    AI_TOGGLE = "ai_toggle"
    QUIT = "quit"

    # Manual
    MMM_HELP = "mmm_help"
    MMM_HELP_COMMAND = "mmm_help_command"
    MMM_ROOM = "mmm_room"
    MMM_EXIT = "mmm_exit"

    UNKNOWN = "unknown"


class Direction(str, Enum):
    """Normalized movement directions."""

    INSIDE = "inside"
    OUT = "out"
    NORTH = "north"
    EAST = "east"
    WEST = "west"
    SOUTH = "south"


class ExamineTarget(str, Enum):
    """Things the player can examine."""

    DESK = "desk"
    DRAWER = "drawer"
    ROOM = "room"
    MIRROR = "mirror"
    TABLE = "table"


class ParsedCommand(BaseModel):
    """A player submission resolved to exactly one command kind.

    ParsedCommand is transient: produced by the grammar for a single
    submission and consumed by the transition engine.

    Attributes:
        kind: The command kind
        raw: The original player input, untouched
        direction: For MOVE: where to go
        target: For EXAMINE: what to look at
        code: For ENTER_CODE: the 4-digit string, verbatim
        ai_enabled: For AI_TOGGLE: the requested setting
        help_query: For MMM_HELP_COMMAND: the command to explain

    Example:
        >>> # "go n"
        >>> command = ParsedCommand(
        ...     kind=CommandKind.MOVE,
        ...     raw="go n",
        ...     direction=Direction.NORTH,
        ... )
    """

    kind: CommandKind
    raw: str

    # Kind-specific payload (at most one is set)
    direction: Direction | None = None
    target: ExamineTarget | None = None
    code: str | None = None
    ai_enabled: bool | None = None
    help_query: str | None = None

    @property
    def is_unknown(self) -> bool:
        return self.kind == CommandKind.UNKNOWN
