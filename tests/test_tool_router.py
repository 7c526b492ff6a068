"""
Tests for the tool router's dispatch.
"""
import asyncio
import logging
from unittest.mock import AsyncMock, Mock

import pytest

from creative_assistant.exceptions import TextGenerationError
from creative_assistant.interaction import ClarificationAdvisor
from creative_assistant.orchestration import ToolRouter
from creative_assistant.schemas import (
    ActionLog,
    ChatMessage,
    ClarificationRequest,
    ConversationContext,
    ImageGenerationRequest,
    Role,
    TextGenerationRequest,
    ToolResult,
    ToolType,
)

SUNSET = "Create a beautiful sunset landscape painting with vibrant colors"
EMAIL = "Write a short email to my boss about the deadline"


def _result(tool: ToolType) -> ToolResult:
    return ToolResult(
        type=tool, content="result", reasoning="because", model_used="fake", execution_time=5
    )


@pytest.fixture
def text_generator():
    generator = Mock()
    generator.generate = AsyncMock(return_value=_result(ToolType.TEXT_GENERATION))
    return generator


@pytest.fixture
def image_generator():
    generator = Mock()
    generator.generate = AsyncMock(return_value=_result(ToolType.IMAGE_GENERATION))
    return generator


@pytest.fixture
def clarification_provider():
    provider = Mock()
    provider.clarify = AsyncMock(return_value=_result(ToolType.CLARIFICATION))
    return provider


@pytest.fixture
def router(text_generator, image_generator, clarification_provider):
    return ToolRouter(text_generator, image_generator, clarification_provider)


def _conversation(count: int) -> ConversationContext:
    messages = []
    for i in range(count):
        role = Role.USER if i % 2 == 0 else Role.ASSISTANT
        messages.append(ChatMessage(id=str(i), role=role, content=f"message {i}"))
    return ConversationContext(messages=messages, session_id="s1")


class TestDispatch:
    """One collaborator per turn."""

    def test_image_request(self, router, text_generator, image_generator, clarification_provider):
        context = ConversationContext(messages=[
            ChatMessage(
                id="1", role=Role.ASSISTANT, content="first", image_url="https://img/1.png",
                action_log=ActionLog(ToolType.IMAGE_GENERATION, "r", "i", "o"),
            ),
            ChatMessage(
                id="2", role=Role.ASSISTANT, content="second", image_url="https://img/2.png",
                action_log=ActionLog(ToolType.IMAGE_GENERATION, "r", "i", "o"),
            ),
            ChatMessage(id="3", role=Role.USER, content="thanks"),
        ])

        result = asyncio.run(router.route_and_execute(SUNSET, context))

        assert result is image_generator.generate.return_value
        image_generator.generate.assert_awaited_once_with(
            ImageGenerationRequest(prompt=SUNSET, previous_image_url="https://img/2.png")
        )
        text_generator.generate.assert_not_awaited()
        clarification_provider.clarify.assert_not_awaited()

    def test_text_request_gets_last_six_lines(self, router, text_generator, image_generator):
        context = _conversation(8)

        result = asyncio.run(router.route_and_execute(EMAIL, context))

        assert result is text_generator.generate.return_value
        expected_lines = [
            "user: message 2",
            "assistant: message 3",
            "user: message 4",
            "assistant: message 5",
            "user: message 6",
            "assistant: message 7",
        ]
        text_generator.generate.assert_awaited_once_with(
            TextGenerationRequest(prompt=EMAIL, context=expected_lines)
        )
        image_generator.generate.assert_not_awaited()

    def test_ambiguous_request(self, router, clarification_provider, text_generator):
        result = asyncio.run(router.route_and_execute("ok", ConversationContext()))

        assert result is clarification_provider.clarify.return_value
        clarification_provider.clarify.assert_awaited_once_with(
            ClarificationRequest(user_input="ok")
        )
        text_generator.generate.assert_not_awaited()

    def test_raw_input_is_forwarded(self, router, image_generator):
        asyncio.run(router.route_and_execute(f"  {SUNSET}  ", ConversationContext()))

        request = image_generator.generate.await_args.args[0]
        assert request.prompt == f"  {SUNSET}  "
        assert request.previous_image_url is None

    def test_with_real_clarification_advisor(self, text_generator, image_generator):
        router = ToolRouter(text_generator, image_generator, ClarificationAdvisor())

        result = asyncio.run(router.route_and_execute("?", ConversationContext()))

        assert result.type == ToolType.CLARIFICATION
        assert "% confidence" in result.content


class TestVerboseLogging:
    def test_verbose_logs_score_breakdown(
        self, text_generator, image_generator, clarification_provider, caplog
    ):
        router = ToolRouter(text_generator, image_generator, clarification_provider, verbose=True)

        with caplog.at_level(logging.INFO, logger="creative_assistant.orchestration.tool_router"):
            asyncio.run(router.route_and_execute(SUNSET, ConversationContext()))

        assert any("Score breakdown" in record.message for record in caplog.records)

    def test_quiet_by_default(self, router, caplog):
        with caplog.at_level(logging.INFO, logger="creative_assistant.orchestration.tool_router"):
            asyncio.run(router.route_and_execute(SUNSET, ConversationContext()))

        assert not any("Score breakdown" in record.message for record in caplog.records)
        assert any("Routing to image-generation" in record.message for record in caplog.records)


class TestFailures:
    """Collaborator errors propagate unchanged."""

    def test_text_failure_propagates(self, router, text_generator):
        error = TextGenerationError("Text generation failed: boom")
        text_generator.generate.side_effect = error

        with pytest.raises(TextGenerationError) as exc_info:
            asyncio.run(router.route_and_execute(EMAIL, ConversationContext()))

        assert exc_info.value is error

    def test_router_usable_after_failure(self, router, text_generator):
        text_generator.generate.side_effect = [RuntimeError("down"), _result(ToolType.TEXT_GENERATION)]

        with pytest.raises(RuntimeError):
            asyncio.run(router.route_and_execute(EMAIL, ConversationContext()))
        result = asyncio.run(router.route_and_execute(EMAIL, ConversationContext()))

        assert result.type == ToolType.TEXT_GENERATION


class TestContextHelpers:
    def test_context_lines_short_history(self, router):
        assert router.extract_context_lines(_conversation(2)) == [
            "user: message 0",
            "assistant: message 1",
        ]

    def test_context_window_is_configurable(self, text_generator, image_generator, clarification_provider):
        router = ToolRouter(
            text_generator, image_generator, clarification_provider, text_context_window=2
        )
        assert router.extract_context_lines(_conversation(5)) == [
            "assistant: message 3",
            "user: message 4",
        ]

    def test_no_previous_image(self, router):
        assert router.find_previous_image_url(_conversation(4)) is None
