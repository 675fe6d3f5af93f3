"""
Static help text: the brief command list, the full "mmm" manual, and
per-command help entries looked up by alias.
"""

from __future__ import annotations

from dataclasses import dataclass

from mansion.engine.parser import normalize

COMMAND_LIST: list[str] = [
    "COMMANDS",
    "help, commands       show this list",
    "look                 describe the room",
    "enter                go inside (entrance only)",
    "back                 go out (main room only)",
    "go inside/out        move between rooms",
    "go north/east/west   (blocked for now)",
    "",
    "examine X            desk, drawer, mirror, table, room",
    "search               search the room for clues",
    "open drawer          try the drawer",
    "enter code ####      attempt a 4-digit code",
    "take key             take the brass key",
    "inventory            show items",
    "quit                 end session",
]

MANUAL_SECTIONS: dict[str, list[str]] = {
    "Movement": [
        "Movement:",
        "- enter / go inside: step from entrance into main room.",
        "- back / go out: return to the entrance.",
        "- go north/east/west: exits are blocked for now.",
        "",
        "Examples:",
        "- enter",
        "- go inside",
        "- back",
        "- go west (will be blocked)",
    ],
    "Interact": [
        "Looking / Interacting:",
        "- look: describe the current room.",
        "- examine desk/drawer/mirror/table/room.",
        "- search: look for clues.",
        "- open drawer: try the drawer.",
        "- take key: pick up the brass key if visible.",
        "",
        "Examples:",
        "- look",
        "- examine mirror",
        "- search",
        "- open drawer",
        "- take key",
    ],
    "Puzzle": [
        "Puzzle:",
        "- enter code #### / use code ####: try a 4-digit code (4312 is correct).",
        "- Drawer unlocks with the right code; then take the brass key.",
        "",
        "Examples:",
        "- enter code 4312",
        "- use code 4312",
    ],
    "AI": [
        "AI Help:",
        "- ai help on / ai help off: toggle AI typo helper.",
        "- AI only tries to fix small typos in known commands.",
        "",
        "Example:",
        "- ai help on",
    ],
    "Debug": [
        "Debug / Manual (MMM):",
        "- mmm help: full manual (this).",
        "- mmm help -<command>: detailed help for one command.",
        "- mmm room description: print room info + exits.",
        "- mmm exit: leave current room (like back/out).",
        "",
        "Examples:",
        "- mmm help",
        "- mmm help -look",
        "- mmm room description",
        "- mmm exit",
    ],
    "Other": [
        "Other:",
        "- inventory: list what you carry.",
        "- quit / exit: end the session.",
        "",
        "Examples:",
        "- inventory",
        "- quit",
    ],
}


@dataclass(frozen=True)
class CommandHelpEntry:
    """Help for one command, reachable through any of its keys."""

    keys: tuple[str, ...]
    lines: tuple[str, ...]


COMMAND_HELP: list[CommandHelpEntry] = [
    CommandHelpEntry(
        keys=("help", "commands"),
        lines=("HELP", "Shows the brief command list.", "Syntax: help", "Example: help"),
    ),
    CommandHelpEntry(
        keys=("look",),
        lines=("LOOK", "Describe the current room.", "Syntax: look", "Example: look"),
    ),
    CommandHelpEntry(
        keys=("go", "move"),
        lines=(
            "GO",
            "Move between rooms. North/east/west are blocked for now.",
            "Syntax: go inside | go out | go north | go east | go west",
            "Examples:",
            "- go inside",
            "- go out",
            "- go west (blocked)",
        ),
    ),
    CommandHelpEntry(
        keys=("enter",),
        lines=("ENTER", "Same as go inside from entrance.", "Syntax: enter", "Example: enter"),
    ),
    CommandHelpEntry(
        keys=("back",),
        lines=("BACK", "Return to the entrance.", "Syntax: back | go out", "Example: back"),
    ),
    CommandHelpEntry(
        keys=("examine",),
        lines=(
            "EXAMINE",
            "Inspect something in the room.",
            "Syntax: examine desk|drawer|mirror|table|room",
            "Examples:",
            "- examine desk",
            "- examine mirror",
            "- examine room",
        ),
    ),
    CommandHelpEntry(
        keys=("search",),
        lines=("SEARCH", "Look for clues.", "Syntax: search | search room", "Example: search"),
    ),
    CommandHelpEntry(
        keys=("open drawer",),
        lines=(
            "OPEN DRAWER",
            "Try to open the drawer.",
            "Syntax: open drawer",
            "Example: open drawer",
            "Note: requires the code first.",
        ),
    ),
    CommandHelpEntry(
        keys=("enter code", "use code"),
        lines=(
            "ENTER CODE",
            "Enter a 4-digit code. The correct code is 4312.",
            "Syntax: enter code #### | use code ####",
            "Examples:",
            "- enter code 4312",
            "- use code 4312",
        ),
    ),
    CommandHelpEntry(
        keys=("take key",),
        lines=("TAKE KEY", "Pick up the brass key if visible.", "Syntax: take key", "Example: take key"),
    ),
    CommandHelpEntry(
        keys=("inventory",),
        lines=(
            "INVENTORY",
            "List what you are carrying.",
            "Syntax: inventory | inv",
            "Example: inventory",
        ),
    ),
    CommandHelpEntry(
        keys=("ai help",),
        lines=(
            "AI HELP",
            "Toggle AI typo helper (fixes small mistakes).",
            "Syntax: ai help on | ai help off",
            "Examples:",
            "- ai help on",
            "- ai help off",
        ),
    ),
    CommandHelpEntry(
        keys=("quit",),
        lines=("QUIT", "End the session.", "Syntax: quit | exit", "Example: quit"),
    ),
    CommandHelpEntry(
        keys=("mmm help",),
        lines=("MMM HELP", "Show the full manual.", "Syntax: mmm help", "Example: mmm help"),
    ),
    CommandHelpEntry(
        keys=("mmm room description", "mmm room"),
        lines=(
            "MMM ROOM DESCRIPTION",
            "Print the current room description and exits.",
            "Syntax: mmm room description | mmm room",
            "Example: mmm room description",
        ),
    ),
    CommandHelpEntry(
        keys=("mmm exit",),
        lines=(
            "MMM EXIT",
            "Leave the current room (like back/out).",
            "Syntax: mmm exit",
            "Examples:",
            "- mmm exit (from main: goes to entrance)",
            "- mmm exit (from entrance: tells you to go inside)",
        ),
    ),
]


def full_manual() -> list[str]:
    """The complete manual shown by 'mmm help'."""
    lines = ["MMM MANUAL", "-------------"]
    for index, section in enumerate(MANUAL_SECTIONS.values()):
        if index:
            lines.append("")
        lines.extend(section)
    return lines


def command_help(query: str) -> list[str] | None:
    """Look up help for one command.

    Leading dashes are stripped and case/whitespace are normalized before
    matching against every alias key.

    Returns:
        The help lines, or None if no entry matches
    """
    normalized = normalize(query.lstrip().lstrip("-"))
    for entry in COMMAND_HELP:
        if any(normalize(key) == normalized for key in entry.keys):
            return list(entry.lines)
    return None
