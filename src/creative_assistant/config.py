from dataclasses import dataclass
from typing import Optional


@dataclass
class CreativeAssistantConfig:
    # LLM / text generation
    llm_provider: str = "groq"
    llm_model: str = "llama-3.1-8b-instant"

    # Image generation
    image_model: str = "dall-e-3"
    image_size: str = "1024x1024"

    # Conversation window
    text_context_window: int = 6
    prompt_context_lines: int = 4

    # Inbound requests
    max_message_length: int = 1000

    verbose: bool = False

    # Injected by CreativeAssistantApp.initialize()
    llm: Optional[object] = None
