"""
Reinterpreter AI.

Asks the configured LLM to turn a near-miss submission (for example
"exmine desk") into exactly one allowed command line. The answer is only
a candidate: anything outside the command allowlist is discarded here,
and the turn processor re-parses whatever survives.

Output decision tree:
    - Empty text after sanitizing -> error INVALID_ARGUMENT
    - Provider not configured     -> error AI_NOT_CONFIGURED
    - Provider timed out          -> error TIMEOUT
    - Any other provider failure  -> error INTERNAL
    - First line not allowlisted  -> empty command
    - Otherwise                   -> lower-cased first line
"""

from __future__ import annotations

import logging
from typing import Any

from mansion.engine.parser import is_allowed_command
from mansion.llm.client import get_completion, get_model_string, is_configured
from mansion.llm.prompt_loader import get_loader
from mansion.models.reinterpret import (
    ReinterpretError,
    ReinterpretRequest,
    ReinterpretResult,
)

logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 200


class ReinterpreterAI:
    """LLM-backed implementation of the Reinterpreter protocol.

    Never raises: every failure is reported through ReinterpretResult.error.

    Example:
        >>> reinterpreter = ReinterpreterAI(session_id="abc")
        >>> result = await reinterpreter.reinterpret(request)
        >>> result.command
        'examine desk'
    """

    def __init__(self, session_id: str | None = None):
        """Initialize the reinterpreter.

        Args:
            session_id: Optional session ID for log messages
        """
        self.session_id = session_id
        self.last_exchange: dict[str, Any] | None = None

    async def reinterpret(self, request: ReinterpretRequest) -> ReinterpretResult:
        """Guess the allowed command the player meant.

        Args:
            request: Raw text plus room, inventory and puzzle context

        Returns:
            ReinterpretResult with a command, an empty command, or an error
        """
        text = request.text.strip()[:MAX_TEXT_LENGTH]
        self.last_exchange = {"text": text}

        result = await self._reinterpret(text, request)

        self.last_exchange.update(command=result.command, error=result.error)
        return result

    async def _reinterpret(
        self, text: str, request: ReinterpretRequest
    ) -> ReinterpretResult:
        if not text:
            return ReinterpretResult(error=ReinterpretError.INVALID_ARGUMENT.value)

        if not is_configured():
            logger.warning(f"[{self.session_id}] Reinterpretation requested but no LLM key is set")
            return ReinterpretResult(error=ReinterpretError.AI_NOT_CONFIGURED.value)

        messages = [
            {"role": "system", "content": self._build_system_prompt(request)},
            {"role": "user", "content": text},
        ]

        logger.info(f"[{self.session_id}] Reinterpreting {text!r}")
        try:
            response = await get_completion(messages, temperature=0, max_tokens=30)
        except TimeoutError:
            return ReinterpretResult(error=ReinterpretError.TIMEOUT.value)
        except Exception as e:
            logger.warning(f"[{self.session_id}] Reinterpretation failed: {type(e).__name__}: {e}")
            return ReinterpretResult(error=ReinterpretError.INTERNAL.value)

        self.last_exchange.update(model=get_model_string(), raw_response=response)

        candidate = self._first_line(response)
        if not candidate or not is_allowed_command(candidate):
            logger.info(f"[{self.session_id}] Discarded candidate {candidate!r}")
            return ReinterpretResult(command="")

        return ReinterpretResult(command=candidate.lower())

    def _build_system_prompt(self, request: ReinterpretRequest) -> str:
        """Build the system prompt with the player's context."""
        prompt_template = get_loader().get_prompt("reinterpreter", "system_prompt.txt")

        return prompt_template.format(
            room_id=request.room_id,
            inventory=", ".join(request.inventory) or "empty",
            drawer_unlocked=str(request.puzzle.drawer_unlocked).lower(),
            solved=str(request.puzzle.solved).lower(),
            key_taken=str(request.puzzle.key_taken).lower(),
        )

    @staticmethod
    def _first_line(response: str | None) -> str:
        stripped = (response or "").strip()
        if not stripped:
            return ""
        return stripped.splitlines()[0].strip()
