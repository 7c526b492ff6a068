"""
Tests for inbound chat request validation.
"""
import pytest

from creative_assistant.schemas import Role, ToolType, UserIntent
from creative_assistant.security import ValidationError, parse_chat_request


def _payload(**overrides):
    payload = {
        "message": "Draw a lighthouse in a storm",
        "context": {
            "sessionId": "session-1",
            "messages": [
                {
                    "id": "1",
                    "role": "assistant",
                    "content": "Generated image",
                    "timestamp": "2025-03-01T12:00:00Z",
                    "imageUrl": "https://img/1.png",
                    "actionLog": {
                        "toolUsed": "image-generation",
                        "reasoning": "visual",
                        "input": "draw",
                        "output": "Generated image",
                        "modelUsed": "dall-e-3",
                        "executionTime": 900,
                    },
                }
            ],
        },
    }
    payload.update(overrides)
    return payload


class TestParseChatRequest:
    def test_valid_request(self):
        request = parse_chat_request(_payload())
        context = request.to_context()

        assert request.message == "Draw a lighthouse in a storm"
        assert context.session_id == "session-1"
        assert context.messages[0].role == Role.ASSISTANT
        assert context.messages[0].image_url == "https://img/1.png"
        assert context.messages[0].action_log.tool_used == ToolType.IMAGE_GENERATION
        assert context.messages[0].action_log.model_used == "dall-e-3"

    def test_last_user_intent(self):
        payload = _payload()
        payload["context"]["lastUserIntent"] = "text"

        context = parse_chat_request(payload).to_context()

        assert context.last_user_intent == UserIntent.TEXT

    def test_empty_message_rejected(self):
        with pytest.raises(ValidationError, match="Invalid request format") as exc_info:
            parse_chat_request(_payload(message=""))
        assert exc_info.value.details

    def test_long_message_rejected(self):
        with pytest.raises(ValidationError):
            parse_chat_request(_payload(message="a" * 1001))

    def test_configured_limit(self):
        with pytest.raises(ValidationError, match="maximum length of 10"):
            parse_chat_request(_payload(message="a" * 11), max_message_length=10)

    def test_configured_limit_above_default(self):
        request = parse_chat_request(_payload(message="a" * 1500), max_message_length=2000)
        assert len(request.message) == 1500

    def test_bad_role_rejected(self):
        payload = _payload()
        payload["context"]["messages"][0]["role"] = "system"
        with pytest.raises(ValidationError):
            parse_chat_request(payload)

    def test_bad_tool_rejected(self):
        payload = _payload()
        payload["context"]["messages"][0]["actionLog"]["toolUsed"] = "video-generation"
        with pytest.raises(ValidationError):
            parse_chat_request(payload)

    def test_missing_session_rejected(self):
        payload = _payload()
        del payload["context"]["sessionId"]
        with pytest.raises(ValidationError):
            parse_chat_request(payload)

    def test_non_object_body_rejected(self):
        with pytest.raises(ValidationError, match="JSON object"):
            parse_chat_request(None)
