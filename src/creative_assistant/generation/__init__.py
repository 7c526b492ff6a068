"""
Generation collaborators dispatched to by the tool router.
"""
from .base import TextGenerator, ImageGenerator, ClarificationProvider
from .text_generation import LangChainTextGenerator
from .image_generation import DallEImageGenerator

__all__ = [
    "TextGenerator",
    "ImageGenerator",
    "ClarificationProvider",
    "LangChainTextGenerator",
    "DallEImageGenerator",
]
