"""
Inbound chat request validation.

Mirrors the JSON shape sent by the chat client (camelCase keys).
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..schemas import ConversationContext
from .exceptions import ValidationError

DEFAULT_MAX_MESSAGE_LENGTH = 1000

ToolName = Literal["text-generation", "image-generation", "clarification"]


class ActionLogPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    tool_used: ToolName = Field(alias="toolUsed")
    reasoning: str
    input: str
    output: str
    model_used: Optional[str] = Field(default=None, alias="modelUsed")
    execution_time: Optional[float] = Field(default=None, alias="executionTime")


class MessagePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    action_log: Optional[ActionLogPayload] = Field(default=None, alias="actionLog")


class ContextPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    messages: List[MessagePayload] = Field(default_factory=list)
    session_id: str = Field(alias="sessionId")
    last_user_intent: Optional[Literal["text", "image", "unclear"]] = Field(
        default=None, alias="lastUserIntent"
    )


class ChatRequest(BaseModel):
    """Validated POST /api/chat body."""
    # Upper bound is configurable and enforced by parse_chat_request
    message: str = Field(min_length=1)
    context: ContextPayload

    def to_context(self) -> ConversationContext:
        payload = self.context.model_dump(mode="json", by_alias=True, exclude_none=True)
        return ConversationContext.from_dict(payload)


def parse_chat_request(
    payload: dict, max_message_length: int = DEFAULT_MAX_MESSAGE_LENGTH
) -> ChatRequest:
    """
    Validate a raw request body.

    :param payload: Decoded JSON body
    :param max_message_length: Upper bound on message length
    :return: ChatRequest
    :raises ValidationError: If the body does not match the schema
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    try:
        request = ChatRequest.model_validate(payload)
    except PydanticValidationError as exc:
        details = exc.errors(include_url=False, include_context=False)
        raise ValidationError("Invalid request format", details=details) from exc

    if len(request.message) > max_message_length:
        raise ValidationError(
            f"Message exceeds maximum length of {max_message_length} characters"
        )
    return request
