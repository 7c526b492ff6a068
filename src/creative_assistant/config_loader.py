"""
Configuration loader with validation.
"""
from dotenv import load_dotenv
from .config import CreativeAssistantConfig
from .config_validator import get_optional_env
from .exceptions import ConfigurationError


def _get_int_env(key: str, default: int) -> int:
    raw = get_optional_env(key, default=str(default))
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ConfigurationError(f"{key} must be positive, got {value}")
    return value


def load_config_from_env() -> CreativeAssistantConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        app = CreativeAssistantApp(config)
        app.initialize()

    :return: Validated CreativeAssistantConfig instance
    :raises: ConfigurationError if a value is malformed
    """
    # Load .env file if it exists (for local development)
    load_dotenv()

    provider = get_optional_env("LLM_PROVIDER", default="groq").lower()
    if provider not in ("groq", "openai"):
        raise ConfigurationError(
            f"LLM_PROVIDER must be 'groq' or 'openai', got '{provider}'"
        )

    return CreativeAssistantConfig(
        llm_provider=provider,
        llm_model=get_optional_env("LLM_MODEL", default="llama-3.1-8b-instant"),
        image_model=get_optional_env("IMAGE_MODEL", default="dall-e-3"),
        image_size=get_optional_env("IMAGE_SIZE", default="1024x1024"),
        text_context_window=_get_int_env("TEXT_CONTEXT_WINDOW", 6),
        prompt_context_lines=_get_int_env("PROMPT_CONTEXT_LINES", 4),
        max_message_length=_get_int_env("MAX_MESSAGE_LENGTH", 1000),
        verbose=get_optional_env("VERBOSE", "false").lower() == "true",
    )
