"""
Creative Assistant Service.

Routes each chat turn to text generation, image generation or a
clarification reply, using a deterministic multi-signal decision engine.
"""
from .app import CreativeAssistantApp
from .config import CreativeAssistantConfig
from .config_loader import load_config_from_env
from .interaction import ClarificationAdvisor, DecisionEngine
from .orchestration import ChatOrchestrator, ToolRouter
from .schemas import (
    ActionLog,
    ChatMessage,
    ConversationContext,
    ToolDecision,
    ToolResult,
    ToolType,
    UserIntent,
)

__all__ = [
    "CreativeAssistantApp",
    "CreativeAssistantConfig",
    "load_config_from_env",
    "ClarificationAdvisor",
    "DecisionEngine",
    "ChatOrchestrator",
    "ToolRouter",
    "ActionLog",
    "ChatMessage",
    "ConversationContext",
    "ToolDecision",
    "ToolResult",
    "ToolType",
    "UserIntent",
]
