"""Unit tests for ReinterpreterAI.

Tests cover:
- Sanitizing and rejecting empty input
- Reporting a missing provider key
- Mapping provider timeouts and failures to error codes
- Taking only the first line of the answer
- Discarding answers outside the allowlist
- Building the system prompt with the player's context
"""

import pytest
from unittest.mock import AsyncMock, patch

from mansion.llm.reinterpreter import MAX_TEXT_LENGTH, ReinterpreterAI
from mansion.models.game import PuzzleState
from mansion.models.reinterpret import ReinterpretError, ReinterpretRequest


def make_request(text: str, **kwargs) -> ReinterpretRequest:
    return ReinterpretRequest(text=text, room_id=kwargs.pop("room_id", "main"), **kwargs)


class TestReinterpreterAI:
    """Tests for ReinterpreterAI."""

    @pytest.fixture
    def reinterpreter(self) -> ReinterpreterAI:
        return ReinterpreterAI(session_id="test-session")

    @pytest.fixture(autouse=True)
    def configured(self):
        with patch("mansion.llm.reinterpreter.is_configured", return_value=True):
            yield

    @pytest.mark.asyncio
    async def test_empty_text(self, reinterpreter) -> None:
        with patch(
            "mansion.llm.reinterpreter.get_completion", new_callable=AsyncMock
        ) as completion:
            result = await reinterpreter.reinterpret(make_request("   "))

        assert result.error == ReinterpretError.INVALID_ARGUMENT.value
        completion.assert_not_called()

    @pytest.mark.asyncio
    async def test_not_configured(self, reinterpreter) -> None:
        with patch("mansion.llm.reinterpreter.is_configured", return_value=False):
            result = await reinterpreter.reinterpret(make_request("exmine desk"))

        assert result.error == ReinterpretError.AI_NOT_CONFIGURED.value
        assert result.failed

    @pytest.mark.asyncio
    async def test_timeout(self, reinterpreter) -> None:
        with patch(
            "mansion.llm.reinterpreter.get_completion",
            new_callable=AsyncMock,
            side_effect=TimeoutError("too slow"),
        ):
            result = await reinterpreter.reinterpret(make_request("exmine desk"))

        assert result.error == ReinterpretError.TIMEOUT.value

    @pytest.mark.asyncio
    async def test_provider_failure(self, reinterpreter) -> None:
        with patch(
            "mansion.llm.reinterpreter.get_completion",
            new_callable=AsyncMock,
            side_effect=RuntimeError("boom"),
        ):
            result = await reinterpreter.reinterpret(make_request("exmine desk"))

        assert result.error == ReinterpretError.INTERNAL.value

    @pytest.mark.asyncio
    async def test_first_line_lowercased(self, reinterpreter) -> None:
        with patch(
            "mansion.llm.reinterpreter.get_completion",
            new_callable=AsyncMock,
            return_value="  Examine Desk\nbecause you typed exmine",
        ):
            result = await reinterpreter.reinterpret(make_request("exmine desk"))

        assert result.command == "examine desk"
        assert result.error is None

    @pytest.mark.asyncio
    async def test_disallowed_answer_discarded(self, reinterpreter) -> None:
        with patch(
            "mansion.llm.reinterpreter.get_completion",
            new_callable=AsyncMock,
            return_value="open the front door",
        ):
            result = await reinterpreter.reinterpret(make_request("opn door"))

        assert result.command == ""
        assert not result.failed

    @pytest.mark.asyncio
    async def test_empty_answer(self, reinterpreter) -> None:
        with patch(
            "mansion.llm.reinterpreter.get_completion",
            new_callable=AsyncMock,
            return_value="",
        ):
            result = await reinterpreter.reinterpret(make_request("zzz"))

        assert result.command == ""

    @pytest.mark.asyncio
    async def test_request_shape(self, reinterpreter) -> None:
        long_text = "x" * (MAX_TEXT_LENGTH + 50)
        with patch(
            "mansion.llm.reinterpreter.get_completion",
            new_callable=AsyncMock,
            return_value="look",
        ) as completion:
            await reinterpreter.reinterpret(make_request(long_text))

        messages = completion.call_args.args[0]
        assert messages[0]["role"] == "system"
        assert messages[1] == {"role": "user", "content": "x" * MAX_TEXT_LENGTH}
        assert completion.call_args.kwargs["temperature"] == 0
        assert completion.call_args.kwargs["max_tokens"] == 30

    @pytest.mark.asyncio
    async def test_last_exchange_recorded(self, reinterpreter) -> None:
        with patch(
            "mansion.llm.reinterpreter.get_completion",
            new_callable=AsyncMock,
            return_value="take key",
        ):
            await reinterpreter.reinterpret(make_request("tkae key"))

        assert reinterpreter.last_exchange["text"] == "tkae key"
        assert reinterpreter.last_exchange["command"] == "take key"
        assert reinterpreter.last_exchange["raw_response"] == "take key"

    def test_system_prompt_context(self, reinterpreter) -> None:
        prompt = reinterpreter._build_system_prompt(
            make_request(
                "tkae key",
                inventory=["brass key"],
                puzzle=PuzzleState(solved=True, drawer_unlocked=True),
            )
        )

        assert "room=main" in prompt
        assert "inventory=brass key" in prompt
        assert "unlocked=true, solved=true, keyTaken=false" in prompt

    def test_system_prompt_empty_inventory(self, reinterpreter) -> None:
        prompt = reinterpreter._build_system_prompt(make_request("lok", room_id="entrance"))

        assert "room=entrance" in prompt
        assert "inventory=empty" in prompt
