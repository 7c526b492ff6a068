from typing import Optional

from langchain_community.utilities.dalle_image_generator import DallEAPIWrapper

from .config import CreativeAssistantConfig
from .config_validator import get_required_env
from .generation.image_generation import DallEImageGenerator


def create_image_generator(
    config: Optional[CreativeAssistantConfig] = None,
) -> DallEImageGenerator:
    """
    Factory function to create a configured DallEImageGenerator.

    :param config: CreativeAssistantConfig instance (defaults used if not provided)
    :return: Image generator ready to inject into the tool router
    """
    config = config or CreativeAssistantConfig()
    api_key = get_required_env(
        "OPENAI_API_KEY",
        description="OpenAI API key for image generation (get from https://platform.openai.com/api-keys)"
    )
    client = DallEAPIWrapper(
        model=config.image_model,
        size=config.image_size,
        api_key=api_key,
    )
    return DallEImageGenerator(client=client, model_name=config.image_model)
