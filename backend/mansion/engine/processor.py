"""
Turn processor.

This module implements the caller loop around the engine: one submission
in, one TurnResponse out. It coordinates parsing, typo reinterpretation,
the transition engine, persistence and Doubt's commentary.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from mansion.engine.doubt import DoubtVoice
from mansion.engine.handlers.meta import SESSION_ENDED
from mansion.engine.parser import CommandParser, is_allowed_command
from mansion.engine.rooms import describe_room
from mansion.engine.transitions import GameEngine
from mansion.engine.typo import is_likely_typo
from mansion.llm.session_logger import log_turn
from mansion.models.game import TurnResponse
from mansion.models.reinterpret import ReinterpretRequest
from mansion.models.trigger import DoubtTrigger

if TYPE_CHECKING:
    from mansion.engine.protocols import Reinterpreter
    from mansion.engine.state import GameStateManager
    from mansion.models.command import ParsedCommand

logger = logging.getLogger(__name__)

TYPO_ATTEMPT = "Doubt tries to read your typo..."
NO_TRANSLATION = "I couldn't translate that. Try 'help'."

# Minimum submissions between two typo whispers
WHISPER_INTERVAL = 2


class TurnProcessor:
    """Processes player submissions for one session.

    Pipeline:
        1. Parse: CommandParser turns the text into a ParsedCommand
        2. Reinterpret: an unknown, typo-looking command is sent to the
           Reinterpreter (AI help must be on) and the candidate re-parsed
        3. Apply: GameEngine produces narration, a delta and a trigger
        4. Persist: the delta is applied and saved by the state manager
        5. Comment: DoubtVoice picks a line for the trigger, and a typo
           whisper when a reinterpretation succeeded

    Example:
        >>> processor = TurnProcessor(manager, ReinterpreterAI(), random.Random(3))
        >>> opening = processor.start()
        >>> response = await processor.process("enter")
        >>> response.state.current_room_id
        'main'
    """

    def __init__(
        self,
        state_manager: "GameStateManager",
        reinterpreter: "Reinterpreter | None" = None,
        rng: random.Random | None = None,
        log_turns: bool = False,
    ):
        """Initialize the processor.

        Args:
            state_manager: The GameStateManager for this session
            reinterpreter: Typo helper; without one, typos stay unknown
            rng: Random source shared by the engine and Doubt
            log_turns: Write a per-session turn log file
        """
        self.state_manager = state_manager
        self.reinterpreter = reinterpreter
        self.log_turns = log_turns

        rng = rng or random.Random()
        self.parser = CommandParser()
        self.engine = GameEngine(state_manager.world_data, rng)
        self.voice = DoubtVoice(rng)

    def start(self) -> TurnResponse:
        """Build the opening narration for a new session.

        Returns:
            TurnResponse with the welcome banner, the current room and
            Doubt's greeting
        """
        state = self.state_manager.get_state()
        session = self.state_manager.get_session()
        world = self.state_manager.world_data

        narration = [
            f"WELCOME TO {world.name.upper()}",
            'TYPE "HELP" FOR COMMANDS.',
            "",
            *describe_room(self.state_manager.get_current_room()),
        ]

        trigger = DoubtTrigger.ENTERED_ENTRANCE
        doubt_line = self._doubt_line(state.doubt_phase, trigger)

        self._log("(opening)", None, narration, doubt_line)
        return TurnResponse(
            narration=narration,
            doubt_line=doubt_line,
            trigger=trigger if doubt_line else None,
            state=state.model_copy(deep=True),
            session_ended=session.ended,
        )

    async def process(self, action: str) -> TurnResponse:
        """Process one player submission.

        Args:
            action: The raw player input

        Returns:
            TurnResponse with narration, Doubt's line and the updated state
        """
        state = self.state_manager.get_state()
        session = self.state_manager.get_session()

        if not action.strip():
            return self._response([], session_ended=session.ended)

        if session.ended:
            return self._response([SESSION_ENDED], session_ended=True)

        session.command_count += 1
        narration: list[str] = []
        suggestion: str | None = None
        command = self.parser.parse(action)
        logger.info(f"[{self.state_manager.session_id}] {action!r} -> {command.kind.value}")

        typo_recovery = False
        if command.is_unknown and state.ai_help_enabled and self.reinterpreter is not None:
            if is_likely_typo(command.raw):
                command, suggestion = await self._reinterpret(command, narration)
                if command is None:
                    self._log(action, None, narration, None, reinterpreted=True)
                    return self._response(narration, suggestion=suggestion)
                typo_recovery = True

        result = self.engine.apply(state, command, session)
        narration.extend(result.narration)

        warning = self.state_manager.apply_updates(result.updates)
        if warning:
            narration.append(warning)

        doubt_line = None
        if result.trigger:
            doubt_line = self._doubt_line(state.doubt_phase, result.trigger)

        if typo_recovery and (
            session.command_count - session.last_whisper_command >= WHISPER_INTERVAL
        ):
            doubt_line = self.voice.typo_whisper(session.last_doubt_line)
            session.last_doubt_line = doubt_line
            session.last_whisper_command = session.command_count

        self._log(action, command.kind.value, narration, doubt_line, typo_recovery)
        return self._response(
            narration,
            doubt_line=doubt_line,
            trigger=result.trigger,
            suggestion=suggestion,
            session_ended=session.ended,
        )

    async def _reinterpret(
        self, command: "ParsedCommand", narration: list[str]
    ) -> tuple["ParsedCommand | None", str | None]:
        """Ask the reinterpreter for the command the player meant.

        Appends the exchange to ``narration``. Returns (None, suggestion)
        when the submission must be abandoned without touching state.
        """
        state = self.state_manager.get_state()
        narration.append(TYPO_ATTEMPT)

        result = await self.reinterpreter.reinterpret(
            ReinterpretRequest(
                text=command.raw,
                room_id=state.current_room_id,
                inventory=list(state.inventory),
                puzzle=state.puzzle.model_copy(),
            )
        )

        if result.failed:
            logger.warning(f"[{self.state_manager.session_id}] Reinterpreter error: {result.error}")
            narration.append(f"Doubt is silent: {result.error}")
            return None, None

        if not result.command or not is_allowed_command(result.command):
            narration.append(NO_TRANSLATION)
            return None, None

        narration.append(f"Doubt suggests: {result.command}")
        candidate = self.parser.parse(result.command)
        if candidate.is_unknown:
            narration.append(NO_TRANSLATION)
            return None, result.command

        return candidate, result.command

    def _doubt_line(self, phase: int, trigger: DoubtTrigger) -> str | None:
        session = self.state_manager.get_session()
        line = self.voice.line_for(phase, trigger, session.last_doubt_line)
        if line:
            session.last_doubt_line = line
        return line

    def _response(self, narration: list[str], **kwargs) -> TurnResponse:
        return TurnResponse(
            narration=narration,
            state=self.state_manager.get_state().model_copy(deep=True),
            **kwargs,
        )

    def _log(
        self,
        raw_input: str,
        command_kind: str | None,
        narration: list[str],
        doubt_line: str | None,
        reinterpreted: bool = False,
    ) -> None:
        if not self.log_turns:
            return
        exchange = getattr(self.reinterpreter, "last_exchange", None) if reinterpreted else None
        log_turn(
            session_id=self.state_manager.session_id,
            world_id=self.state_manager.world_id or "default",
            raw_input=raw_input,
            command_kind=command_kind,
            narration=narration,
            doubt_line=doubt_line,
            reinterpretation=exchange,
        )
