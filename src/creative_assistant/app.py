"""
Public application facade for Creative Assistant Service.

This is the single stable entry point for the library.
All internal structure can change freely, but this API remains stable.
"""
import asyncio
import logging
from typing import Optional

from .config import CreativeAssistantConfig
from .exceptions import ServiceNotInitializedError
from .generation.base import ImageGenerator, TextGenerator
from .generation.text_generation import LangChainTextGenerator
from .image_factory import create_image_generator
from .interaction.clarification_advisor import ClarificationAdvisor
from .interaction.decision_engine import DecisionEngine
from .llm_factory import get_llm_instance
from .orchestration.chat_orchestrator import ChatOrchestrator
from .orchestration.tool_router import ToolRouter
from .schemas import ChatMessage, ConversationContext, ToolDecision

logger = logging.getLogger(__name__)


class CreativeAssistantApp:
    """
    Public application facade for Creative Assistant Service.

    All dependency wiring and factory usage is encapsulated here.

    Usage:
        config = load_config_from_env()
        app = CreativeAssistantApp(config)
        app.initialize()
        reply = app.chat("Draw a lighthouse in a storm", ConversationContext())
    """

    def __init__(
        self,
        config: CreativeAssistantConfig,
        text_generator: Optional[TextGenerator] = None,
        image_generator: Optional[ImageGenerator] = None,
    ):
        """
        Initialize the application facade.

        :param config: CreativeAssistantConfig instance
        :param text_generator: Pre-built text collaborator (skips the LLM factory)
        :param image_generator: Pre-built image collaborator (skips the image factory)
        """
        self._config = config
        self._text_generator = text_generator
        self._image_generator = image_generator
        self._engine = DecisionEngine()
        self._orchestrator: Optional[ChatOrchestrator] = None

    @property
    def config(self) -> CreativeAssistantConfig:
        return self._config

    def initialize(self) -> None:
        """
        Build any missing collaborators and wire the router.

        Call this once before using chat().
        """
        if self._orchestrator:
            return

        if self._text_generator is None:
            self._config.llm = get_llm_instance(
                provider=self._config.llm_provider,
                model=self._config.llm_model,
            )
            self._text_generator = LangChainTextGenerator(
                llm=self._config.llm,
                model_name=self._config.llm_model,
                prompt_context_lines=self._config.prompt_context_lines,
            )

        if self._image_generator is None:
            self._image_generator = create_image_generator(config=self._config)

        router = ToolRouter(
            text_generator=self._text_generator,
            image_generator=self._image_generator,
            clarification_provider=ClarificationAdvisor(),
            decision_engine=self._engine,
            text_context_window=self._config.text_context_window,
            verbose=self._config.verbose,
        )
        self._orchestrator = ChatOrchestrator(router)
        logger.info(
            f"Creative assistant initialized (llm={self._config.llm_provider}/"
            f"{self._config.llm_model}, image={self._config.image_model})"
        )

    def decide(self, message: str, context: Optional[ConversationContext] = None) -> ToolDecision:
        """Classify a message without calling any backend."""
        return self._engine.decide(message, context or ConversationContext())

    async def achat(self, message: str, context: ConversationContext) -> ChatMessage:
        """
        Handle one chat turn.

        :return: Assistant ChatMessage with its ActionLog
        :raises ServiceNotInitializedError: if initialize() has not been called
        """
        if not self._orchestrator:
            raise ServiceNotInitializedError("App not initialized. Call initialize() first.")

        return await self._orchestrator.handle_message(message, context)

    def chat(self, message: str, context: ConversationContext) -> ChatMessage:
        """Synchronous wrapper around achat() for WSGI and CLI callers."""
        return asyncio.run(self.achat(message, context))
