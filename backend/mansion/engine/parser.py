"""
Rule-based command grammar for the mansion engine.

This module turns raw player text into exactly one ParsedCommand. It never
fails: anything it does not recognize becomes an UNKNOWN command, which the
turn processor may hand to the reinterpreter when it looks like a typo.

It also holds the allowlist that any reinterpreted command line must match
before it is trusted.
"""

from __future__ import annotations

import re

from mansion.models.command import CommandKind, Direction, ExamineTarget, ParsedCommand

_WHITESPACE = re.compile(r"\s+")

# Command lines a reinterpreter suggestion may take
ALLOWED_COMMAND_PATTERNS: list[re.Pattern[str]] = [
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"^help$",
        r"^look$",
        r"^enter$",
        r"^back$",
        r"^go (inside|out|north|east|west|south)$",
        r"^examine (desk|drawer|mirror|table|room)$",
        r"^search( room)?$",
        r"^open drawer$",
        r"^(enter|use) code \d{4}$",
        r"^take key$",
        r"^inventory$",
        r"^ai help (on|off)$",
        r"^(quit|exit)$",
    )
]


def normalize(text: str) -> str:
    """Trim, lowercase and collapse internal whitespace runs."""
    return _WHITESPACE.sub(" ", text.strip().lower())


def is_allowed_command(text: str) -> bool:
    """Check a suggested command line against the allowlist."""
    candidate = text.strip()
    return any(pattern.match(candidate) for pattern in ALLOWED_COMMAND_PATTERNS)


class CommandParser:
    """Parse player input into a ParsedCommand.

    Rules are checked in a fixed precedence and the first match wins:

        Literal words: help, commands, look, quit, exit, inventory, inv
        AI toggle: ai help on, ai help off
        Manual: mmm help, mmm help -<command>, mmm room [description], mmm exit
        Movement: enter, go inside, back, go out, go <direction>
        Looking: examine <target>, search [room]
        Puzzle: open drawer, enter/use code ####, take/grab key

    Example:
        >>> parser = CommandParser()
        >>> command = parser.parse("  Go   N ")
        >>> command.kind == CommandKind.MOVE
        True
        >>> command.direction
        <Direction.NORTH: 'north'>
    """

    # Single words or fixed phrases: maps phrase to command kind
    LITERAL_COMMANDS: dict[str, CommandKind] = {
        "help": CommandKind.HELP,
        "commands": CommandKind.HELP,
        "look": CommandKind.LOOK,
        "quit": CommandKind.QUIT,
        "exit": CommandKind.QUIT,
        "inventory": CommandKind.INVENTORY,
        "inv": CommandKind.INVENTORY,
    }

    AI_TOGGLES: dict[str, bool] = {
        "ai help on": True,
        "ai help off": False,
    }

    # Movement phrases that need no direction word
    MOVE_PHRASES: dict[str, Direction] = {
        "enter": Direction.INSIDE,
        "go inside": Direction.INSIDE,
        "back": Direction.OUT,
        "go out": Direction.OUT,
    }

    DIRECTION_ALIASES: dict[str, Direction] = {
        "inside": Direction.INSIDE,
        "in": Direction.INSIDE,
        "into": Direction.INSIDE,
        "out": Direction.OUT,
        "outside": Direction.OUT,
        "exit": Direction.OUT,
        "north": Direction.NORTH,
        "n": Direction.NORTH,
        "east": Direction.EAST,
        "e": Direction.EAST,
        "west": Direction.WEST,
        "w": Direction.WEST,
        "south": Direction.SOUTH,
        "s": Direction.SOUTH,
    }

    EXAMINE_TARGETS: dict[str, ExamineTarget] = {
        target.value: target for target in ExamineTarget
    }

    SEARCH_PHRASES: tuple[str, ...] = ("search", "search room")
    TAKE_KEY_PHRASES: tuple[str, ...] = ("take key", "grab key")
    CODE_PATTERN = re.compile(r"^(enter|use) code (\d{4})$")

    def parse(self, raw_input: str) -> ParsedCommand:
        """Parse player input into a ParsedCommand.

        Args:
            raw_input: The raw player input string

        Returns:
            ParsedCommand; kind is UNKNOWN if nothing matched
        """
        cleaned = normalize(raw_input)

        if not cleaned:
            return self._unknown(raw_input)

        kind = self.LITERAL_COMMANDS.get(cleaned)
        if kind is not None:
            return ParsedCommand(kind=kind, raw=raw_input)

        if cleaned in self.AI_TOGGLES:
            return ParsedCommand(
                kind=CommandKind.AI_TOGGLE,
                raw=raw_input,
                ai_enabled=self.AI_TOGGLES[cleaned],
            )

        if cleaned == "mmm" or cleaned.startswith("mmm "):
            return self._parse_manual(cleaned[3:].strip(), raw_input)

        move = self._parse_move(cleaned, raw_input)
        if move is not None:
            return move

        if cleaned.startswith("examine "):
            target = self.EXAMINE_TARGETS.get(cleaned[len("examine "):].strip())
            if target is None:
                return self._unknown(raw_input)
            return ParsedCommand(kind=CommandKind.EXAMINE, raw=raw_input, target=target)

        if cleaned in self.SEARCH_PHRASES:
            return ParsedCommand(kind=CommandKind.SEARCH, raw=raw_input)

        if cleaned == "open drawer":
            return ParsedCommand(kind=CommandKind.OPEN_DRAWER, raw=raw_input)

        match = self.CODE_PATTERN.match(cleaned)
        if match:
            return ParsedCommand(
                kind=CommandKind.ENTER_CODE, raw=raw_input, code=match.group(2)
            )

        if cleaned in self.TAKE_KEY_PHRASES:
            return ParsedCommand(kind=CommandKind.TAKE_KEY, raw=raw_input)

        return self._unknown(raw_input)

    def _parse_manual(self, rest: str, raw_input: str) -> ParsedCommand:
        """Parse the 'mmm' debug/manual namespace."""
        if rest == "help":
            return ParsedCommand(kind=CommandKind.MMM_HELP, raw=raw_input)
        if rest.startswith("help -"):
            return ParsedCommand(
                kind=CommandKind.MMM_HELP_COMMAND,
                raw=raw_input,
                help_query=rest[len("help -"):].strip(),
            )
        if rest in ("room", "room description"):
            return ParsedCommand(kind=CommandKind.MMM_ROOM, raw=raw_input)
        if rest == "exit":
            return ParsedCommand(kind=CommandKind.MMM_EXIT, raw=raw_input)
        return self._unknown(raw_input)

    def _parse_move(self, cleaned: str, raw_input: str) -> ParsedCommand | None:
        """Parse movement phrases; None means 'not a movement phrase'."""
        direction = self.MOVE_PHRASES.get(cleaned)
        if direction is not None:
            return ParsedCommand(kind=CommandKind.MOVE, raw=raw_input, direction=direction)

        if cleaned.startswith("go "):
            direction = self.DIRECTION_ALIASES.get(cleaned[len("go "):].strip())
            if direction is None:
                return self._unknown(raw_input)
            return ParsedCommand(kind=CommandKind.MOVE, raw=raw_input, direction=direction)

        return None

    @staticmethod
    def _unknown(raw_input: str) -> ParsedCommand:
        return ParsedCommand(kind=CommandKind.UNKNOWN, raw=raw_input)
