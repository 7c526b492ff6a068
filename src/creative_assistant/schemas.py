"""
Shared data shapes for routing and generation.

Pure domain models - no Flask, no LangChain.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class ToolType(str, Enum):
    """Collaborator chosen to handle a user turn."""
    TEXT_GENERATION = "text-generation"
    IMAGE_GENERATION = "image-generation"
    CLARIFICATION = "clarification"


class UserIntent(str, Enum):
    """Coarse intent remembered for the session."""
    TEXT = "text"
    IMAGE = "image"
    UNCLEAR = "unclear"


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ToolDecision:
    """Decision engine output: chosen tool, confidence and justification."""
    tool: ToolType
    confidence: float
    reasoning: str


@dataclass(frozen=True)
class ToolResult:
    type: ToolType
    content: str
    reasoning: str
    model_used: str
    execution_time: int
    image_url: Optional[str] = None


@dataclass(frozen=True)
class ActionLog:
    """Audit record attached to an assistant reply."""
    tool_used: ToolType
    reasoning: str
    input: str
    output: str
    model_used: Optional[str] = None
    execution_time: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ActionLog":
        return cls(
            tool_used=ToolType(data["toolUsed"]),
            reasoning=data.get("reasoning", ""),
            input=data.get("input", ""),
            output=data.get("output", ""),
            model_used=data.get("modelUsed"),
            execution_time=data.get("executionTime"),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "toolUsed": self.tool_used.value,
            "reasoning": self.reasoning,
            "input": self.input,
            "output": self.output,
        }
        if self.model_used is not None:
            payload["modelUsed"] = self.model_used
        if self.execution_time is not None:
            payload["executionTime"] = self.execution_time
        return payload


@dataclass
class ChatMessage:
    id: str
    role: Role
    content: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    image_url: Optional[str] = None
    action_log: Optional[ActionLog] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChatMessage":
        """Build a message from its JSON wire shape."""
        timestamp = data.get("timestamp")
        if isinstance(timestamp, str):
            timestamp = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        action_log = data.get("actionLog")
        return cls(
            id=data["id"],
            role=Role(data["role"]),
            content=data.get("content", ""),
            timestamp=timestamp or datetime.now(timezone.utc),
            image_url=data.get("imageUrl"),
            action_log=ActionLog.from_dict(action_log) if action_log else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "id": self.id,
            "role": self.role.value,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.image_url is not None:
            payload["imageUrl"] = self.image_url
        if self.action_log is not None:
            payload["actionLog"] = self.action_log.to_dict()
        return payload


@dataclass
class ConversationContext:
    """Conversation window supplied by the caller, oldest message first."""
    messages: List[ChatMessage] = field(default_factory=list)
    session_id: str = "default"
    last_user_intent: Optional[UserIntent] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConversationContext":
        last_intent = data.get("lastUserIntent")
        return cls(
            messages=[ChatMessage.from_dict(m) for m in data.get("messages", [])],
            session_id=data.get("sessionId", "default"),
            last_user_intent=UserIntent(last_intent) if last_intent else None,
        )


@dataclass(frozen=True)
class TextGenerationRequest:
    prompt: str
    context: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ImageGenerationRequest:
    prompt: str
    previous_image_url: Optional[str] = None


@dataclass(frozen=True)
class ClarificationRequest:
    user_input: str
    suggestions: List[str] = field(default_factory=list)
