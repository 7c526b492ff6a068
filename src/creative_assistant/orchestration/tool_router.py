"""
Tool router - decide, then dispatch to exactly one collaborator.

Stateless: all history arrives through the ConversationContext.
Collaborator failures propagate to the caller unchanged.
"""
import logging
from typing import List, Optional

from ..generation.base import ClarificationProvider, ImageGenerator, TextGenerator
from ..interaction.decision_engine import DecisionEngine
from ..schemas import (
    ClarificationRequest,
    ConversationContext,
    ImageGenerationRequest,
    TextGenerationRequest,
    ToolDecision,
    ToolResult,
    ToolType,
)

logger = logging.getLogger(__name__)

TEXT_CONTEXT_WINDOW = 6


class ToolRouter:
    """
    Routes a user turn to text generation, image generation or clarification.

    Usage:
        router = ToolRouter(text_generator, image_generator, ClarificationAdvisor())
        result = await router.route_and_execute("Draw a red fox", context)
    """

    def __init__(
        self,
        text_generator: TextGenerator,
        image_generator: ImageGenerator,
        clarification_provider: ClarificationProvider,
        decision_engine: Optional[DecisionEngine] = None,
        text_context_window: int = TEXT_CONTEXT_WINDOW,
        verbose: bool = False,
    ):
        """
        :param text_generator: Text generation collaborator
        :param image_generator: Image generation collaborator
        :param clarification_provider: Clarification collaborator
        :param decision_engine: Engine override (defaults to DecisionEngine())
        :param text_context_window: Context messages forwarded to text generation
        :param verbose: Log the per-factor score breakdown for every turn
        """
        self._text_generator = text_generator
        self._image_generator = image_generator
        self._clarification_provider = clarification_provider
        self._engine = decision_engine or DecisionEngine()
        self._text_context_window = text_context_window
        self._verbose = verbose

    def decide(self, user_input: str, context: ConversationContext) -> ToolDecision:
        return self._engine.decide(user_input, context)

    async def route_and_execute(
        self, user_input: str, context: ConversationContext
    ) -> ToolResult:
        """
        Classify the input and run the chosen collaborator.

        :param user_input: Raw user utterance
        :param context: Conversation window
        :return: The collaborator's ToolResult, unmodified
        """
        decision = self.decide(user_input, context)
        logger.info(
            f"Routing to {decision.tool.value} "
            f"(confidence {decision.confidence:.2f}): {decision.reasoning}"
        )
        if self._verbose:
            breakdown = self._engine.score(user_input, context)
            logger.info(
                f"Score breakdown: {breakdown.factors} "
                f"image={breakdown.image_score:.2f} text={breakdown.text_score:.2f}"
            )

        if decision.tool == ToolType.TEXT_GENERATION:
            return await self._text_generator.generate(
                TextGenerationRequest(
                    prompt=user_input,
                    context=self.extract_context_lines(context),
                )
            )

        if decision.tool == ToolType.IMAGE_GENERATION:
            return await self._image_generator.generate(
                ImageGenerationRequest(
                    prompt=user_input,
                    previous_image_url=self.find_previous_image_url(context),
                )
            )

        return await self._clarification_provider.clarify(
            ClarificationRequest(user_input=user_input)
        )

    def extract_context_lines(self, context: ConversationContext) -> List[str]:
        """Render the most recent messages as "<role>: <content>" lines."""
        recent = context.messages[-self._text_context_window:]
        return [f"{message.role.value}: {message.content}" for message in recent]

    @staticmethod
    def find_previous_image_url(context: ConversationContext) -> Optional[str]:
        for message in reversed(context.messages):
            if message.image_url is not None:
                return message.image_url
        return None
