import logging
from typing import Any

from .config_validator import get_required_env

# Groq and OpenAI chat models are optional extras
try:
    from langchain_groq import ChatGroq
except ImportError:
    ChatGroq = None

try:
    from langchain_openai import ChatOpenAI
except ImportError:
    ChatOpenAI = None

logger = logging.getLogger(__name__)

KNOWN_GROQ_MODELS = [
    "llama-3.1-8b-instant",
    "llama-3.3-70b-versatile",
    "llama-3.2-3b-preview",
    "mixtral-8x7b-32768",
]


def get_llm_instance(provider: str, model: str) -> Any:
    """
    Factory to return a ready-to-use chat model based on provider name.

    :param provider: 'groq' or 'openai'
    :param model: LLM model name
    :return: LangChain chat model
    """
    provider = provider.lower()

    if provider == "groq":
        if ChatGroq is None:
            raise ImportError("langchain_groq not installed")

        api_key = get_required_env(
            "GROQ_API_KEY",
            description="Groq API key for text generation (get from https://console.groq.com/keys)"
        )

        if model not in KNOWN_GROQ_MODELS:
            # Warn but don't fail - Groq adds models regularly
            logger.warning(
                f"Model '{model}' not in known Groq models. Known models: {KNOWN_GROQ_MODELS}"
            )

        return ChatGroq(model=model, api_key=api_key, streaming=False)

    elif provider == "openai":
        if ChatOpenAI is None:
            raise ImportError("langchain_openai not installed")

        api_key = get_required_env(
            "OPENAI_API_KEY",
            description="OpenAI API key for text generation (get from https://platform.openai.com/api-keys)"
        )
        return ChatOpenAI(model=model, api_key=api_key, streaming=False)

    else:
        raise ValueError(f"Unknown LLM provider: {provider}")
