"""
Image generation backed by LangChain's DALL-E wrapper.
"""
import asyncio
import logging

from langchain_community.utilities.dalle_image_generator import DallEAPIWrapper

from ..exceptions import ImageGenerationError
from ..schemas import ImageGenerationRequest, ToolResult, ToolType
from ..utils.timing import measure_execution_time

logger = logging.getLogger(__name__)


class DallEImageGenerator:
    """
    Image generator returning a hosted image URL.

    The wrapper is synchronous, so calls run in a worker thread.
    """

    def __init__(self, client: DallEAPIWrapper, model_name: str):
        """
        :param client: Configured DallEAPIWrapper
        :param model_name: Model identifier reported in results
        """
        self._client = client
        self._model_name = model_name.split("/")[-1] or "image-model"

    async def generate(self, request: ImageGenerationRequest) -> ToolResult:
        if request.previous_image_url:
            # Backend has no image-to-image input; kept for the audit trail only
            logger.debug(f"Previous image available: {request.previous_image_url}")

        image_url, execution_time = await measure_execution_time(
            lambda: self._call_backend(request.prompt)
        )
        return ToolResult(
            type=ToolType.IMAGE_GENERATION,
            content=f'Generated image for: "{request.prompt}"',
            image_url=image_url,
            reasoning="User requested visual content or described an image idea",
            model_used=self._model_name,
            execution_time=execution_time,
        )

    async def _call_backend(self, prompt: str) -> str:
        try:
            output = await asyncio.to_thread(self._client.run, prompt)
        except Exception as exc:
            logger.error(f"Image backend call failed: {exc}")
            raise ImageGenerationError(f"Image generation failed: {exc}") from exc

        # run() returns newline-separated URLs when n > 1
        image_url = (output or "").strip().split("\n")[0].strip()
        if not image_url.startswith(("http://", "https://")):
            raise ImageGenerationError("No valid image URL received from the image backend")
        return image_url
