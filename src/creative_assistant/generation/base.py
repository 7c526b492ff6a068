from typing import Protocol
from ..schemas import (
    ClarificationRequest,
    ImageGenerationRequest,
    TextGenerationRequest,
    ToolResult,
)


class TextGenerator(Protocol):
    """Protocol for a text generation backend."""
    async def generate(self, request: TextGenerationRequest) -> ToolResult:
        ...


class ImageGenerator(Protocol):
    """Protocol for an image generation backend."""
    async def generate(self, request: ImageGenerationRequest) -> ToolResult:
        ...


class ClarificationProvider(Protocol):
    """Protocol for a clarification responder. Must not raise."""
    async def clarify(self, request: ClarificationRequest) -> ToolResult:
        ...
