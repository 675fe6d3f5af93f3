"""
Session-based turn logger.

Creates a human-readable log file for each game session with every
turn's input, parsed command, reinterpretation exchange and narration.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from mansion.config import get_logs_dir


class SessionLogger:
    """Logs turns for a game session to a dedicated file."""

    def __init__(self, session_id: str, world_id: str, logs_dir: Path | None = None):
        self.session_id = session_id
        self.world_id = world_id
        self.logs_dir = logs_dir or get_logs_dir()
        self.turn_count = 0
        self.log_file: Path | None = None

    def _ensure_log_file(self) -> Path:
        """Create the log file on first turn."""
        if self.log_file is None:
            world_dir = self.logs_dir / self.world_id
            world_dir.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            self.log_file = world_dir / f"{timestamp}_{self.session_id}.log"

            with open(self.log_file, "w", encoding="utf-8") as f:
                f.write("Mystery Mansion Session Log\n")
                f.write("===========================\n")
                f.write(f"Session ID: {self.session_id}\n")
                f.write(f"World: {self.world_id}\n")
                f.write(f"Started: {datetime.now().isoformat()}\n")
                f.write("\n")

        return self.log_file

    def log_turn(
        self,
        raw_input: str,
        command_kind: str | None,
        narration: list[str],
        doubt_line: str | None = None,
        reinterpretation: dict | None = None,
    ) -> None:
        """Log a complete turn to the session file.

        Args:
            raw_input: The original player input string
            command_kind: Kind of the command that was applied, None if aborted
            narration: Narration lines shown to the player
            doubt_line: Doubt's line for this turn, if any
            reinterpretation: Request/response of the reinterpreter, if consulted
        """
        log_file = self._ensure_log_file()
        self.turn_count += 1

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        with open(log_file, "a", encoding="utf-8") as f:
            f.write("═" * 70 + "\n")
            f.write(f"TURN #{self.turn_count} | {timestamp}\n")
            f.write("═" * 70 + "\n\n")

            f.write("─── PLAYER INPUT ───\n")
            f.write(f'"{raw_input}"\n\n')

            f.write("─── COMMAND ───\n")
            f.write(f"{command_kind or '(aborted)'}\n\n")

            if reinterpretation:
                f.write("─── REINTERPRETER ───\n")
                for key, value in reinterpretation.items():
                    value_str = str(value)
                    if len(value_str) > 100:
                        value_str = value_str[:100] + "..."
                    f.write(f"  {key}: {value_str}\n")
                f.write("\n")

            f.write("─── NARRATION ───\n")
            for line in narration:
                f.write(f"{line}\n")
            f.write("\n")

            if doubt_line:
                f.write("─── DOUBT ───\n")
                f.write(f"{doubt_line}\n\n")


# Store active loggers per session
_session_loggers: dict[str, SessionLogger] = {}


def get_session_logger(session_id: str, world_id: str) -> SessionLogger:
    """Get or create a session logger for the given session."""
    if session_id not in _session_loggers:
        _session_loggers[session_id] = SessionLogger(session_id, world_id)
    return _session_loggers[session_id]


def close_session_logger(session_id: str) -> None:
    """Forget the logger of a finished session."""
    _session_loggers.pop(session_id, None)


def log_turn(
    session_id: str,
    world_id: str,
    raw_input: str,
    command_kind: str | None,
    narration: list[str],
    doubt_line: str | None = None,
    reinterpretation: dict | None = None,
) -> None:
    """Convenience function to log a turn."""
    logger = get_session_logger(session_id, world_id)
    logger.log_turn(
        raw_input=raw_input,
        command_kind=command_kind,
        narration=narration,
        doubt_line=doubt_line,
        reinterpretation=reinterpretation,
    )
