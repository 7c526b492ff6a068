"""
Chat orchestrator - turns a routed result into the assistant's reply.

Builds the audit ActionLog and the assistant ChatMessage around the
ToolResult produced by the tool router.
"""
from datetime import datetime, timezone

from ..schemas import (
    ActionLog,
    ChatMessage,
    ConversationContext,
    Role,
    ToolResult,
    ToolType,
    UserIntent,
)
from ..utils.timing import generate_id
from .tool_router import ToolRouter

_INTENT_BY_TOOL = {
    ToolType.TEXT_GENERATION: UserIntent.TEXT,
    ToolType.IMAGE_GENERATION: UserIntent.IMAGE,
    ToolType.CLARIFICATION: UserIntent.UNCLEAR,
}


class ChatOrchestrator:
    """
    Orchestrates a single chat turn.

    Read path: ConversationContext + message → ToolRouter → assistant message
    """

    def __init__(self, router: ToolRouter):
        self._router = router

    async def handle_message(
        self, user_message: str, context: ConversationContext
    ) -> ChatMessage:
        """
        Route a user message and wrap the outcome as an assistant message.

        :param user_message: Raw user utterance
        :param context: Conversation window supplied by the caller
        :return: Assistant ChatMessage carrying its ActionLog
        """
        result = await self._router.route_and_execute(user_message, context)
        return self.build_assistant_message(user_message, result)

    @staticmethod
    def build_action_log(user_message: str, result: ToolResult) -> ActionLog:
        return ActionLog(
            tool_used=result.type,
            reasoning=result.reasoning,
            input=user_message,
            output=result.content,
            model_used=result.model_used,
            execution_time=result.execution_time,
        )

    def build_assistant_message(self, user_message: str, result: ToolResult) -> ChatMessage:
        return ChatMessage(
            id=generate_id(),
            role=Role.ASSISTANT,
            content=result.content,
            timestamp=datetime.now(timezone.utc),
            image_url=result.image_url,
            action_log=self.build_action_log(user_message, result),
        )

    @staticmethod
    def infer_user_intent(tool: ToolType) -> UserIntent:
        """Map the tool that handled a turn to the session's last user intent."""
        return _INTENT_BY_TOOL[tool]
