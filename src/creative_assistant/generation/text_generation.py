"""
Text generation backed by a LangChain chat model.
"""
import logging
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel

from ..exceptions import TextGenerationError
from ..schemas import TextGenerationRequest, ToolResult, ToolType
from ..utils.timing import measure_execution_time

logger = logging.getLogger(__name__)


class LangChainTextGenerator:
    """
    Text generator over any LangChain chat model.

    The chat model is injected (see llm_factory.get_llm_instance), so
    tests can pass a fake model.
    """

    def __init__(self, llm: BaseChatModel, model_name: str, prompt_context_lines: int = 4):
        """
        :param llm: LangChain chat model
        :param model_name: Model identifier reported in results
        :param prompt_context_lines: How many context lines go into the prompt
        """
        self._llm = llm
        self._model_name = model_name.split("/")[-1] or "text-model"
        self._prompt_context_lines = prompt_context_lines

    async def generate(self, request: TextGenerationRequest) -> ToolResult:
        content, execution_time = await measure_execution_time(
            lambda: self._call_model(request)
        )
        return ToolResult(
            type=ToolType.TEXT_GENERATION,
            content=content,
            reasoning="User requested text content or assistance",
            model_used=self._model_name,
            execution_time=execution_time,
        )

    def build_prompt(self, request: TextGenerationRequest) -> str:
        if not request.context:
            return request.prompt

        context_string = "\n".join(request.context[-self._prompt_context_lines:])
        return f"Context:\n{context_string}\n\nUser: {request.prompt}\n\nAssistant:"

    async def _call_model(self, request: TextGenerationRequest) -> str:
        prompt = self.build_prompt(request)
        try:
            response = await self._llm.ainvoke(prompt)
        except Exception as exc:
            logger.error(f"Text backend call failed: {exc}")
            raise TextGenerationError(f"Text generation failed: {exc}") from exc

        result = _message_text(response).strip()
        if not result:
            raise TextGenerationError("No content received from the language model")
        return result


def _message_text(response: Any) -> str:
    """Flatten a chat model response into plain text."""
    content = getattr(response, "content", response)
    if isinstance(content, list):
        # Some providers return content blocks
        return "".join(
            block.get("text", "") if isinstance(block, dict) else str(block)
            for block in content
        )
    return str(content)
