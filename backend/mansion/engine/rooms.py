"""
Room description rendering.

The main room has a one-time intro and a repeatable "look" variant; other
rooms render from their world data. The "mmm room" debug view adds the
permanently blocked exits.
"""

from __future__ import annotations

from mansion.models.command import Direction
from mansion.models.world import MAIN_ROOM, Room

# Exits that exist in the story but can never be used
BLOCKED_DIRECTIONS: tuple[Direction, ...] = (Direction.NORTH, Direction.EAST, Direction.WEST)

MAIN_INTRO_LINES: list[str] = [
    "You step into the main room.",
    "A long table sits in the center.",
    "A desk rests near the far wall.",
    "A tall mirror stands to the right.",
    "The air feels heavier here.",
]

MAIN_LOOK_LINES: list[str] = [
    "The main room is quiet.",
    "You see:",
    "- a table",
    "- a desk",
    "- a mirror",
    "- doorways to the north, east, and west",
    "- the doorway back out",
]


def exits_text(room: Room) -> str:
    if not room.exits:
        return "None"
    return ", ".join(direction.upper() for direction in room.exits)


def describe_room(room: Room, intro: bool = False) -> list[str]:
    """Render a room for 'look', 'examine room' and arrivals.

    Args:
        room: The room to describe
        intro: Use the first-visit variant (main room only)
    """
    if room.id == MAIN_ROOM:
        return list(MAIN_INTRO_LINES if intro else MAIN_LOOK_LINES)

    return [
        room.name,
        room.description,
        f"Exits: {exits_text(room)}",
    ]


def describe_room_debug(room: Room) -> list[str]:
    """Render a room with every exit annotated, blocked ones included."""
    if room.id != MAIN_ROOM:
        label = "Exit" if len(room.exits) == 1 else "Exits"
        return [room.description, f"{label}: {exits_text(room)}"]

    lines = [
        line.replace("north, east, and west", "north, east, and west (blocked)")
        for line in MAIN_LOOK_LINES
    ]
    exits = [direction.upper() for direction in room.exits]
    exits += [f"{direction.value.upper()} (blocked)" for direction in BLOCKED_DIRECTIONS]
    lines.append(f"Exits: {', '.join(exits)}")
    return lines
