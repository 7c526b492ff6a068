"""
Tests for configuration loading and validation.
"""
import pytest

from creative_assistant.config import CreativeAssistantConfig
from creative_assistant.config_loader import load_config_from_env
from creative_assistant.config_validator import (
    _mask_secret,
    get_optional_env,
    get_required_env,
)
from creative_assistant.exceptions import ConfigurationError

ENV_KEYS = [
    "LLM_PROVIDER", "LLM_MODEL", "IMAGE_MODEL", "IMAGE_SIZE",
    "TEXT_CONTEXT_WINDOW", "PROMPT_CONTEXT_LINES", "MAX_MESSAGE_LENGTH", "VERBOSE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    # Keep a developer's .env file out of the tests
    monkeypatch.setattr("creative_assistant.config_loader.load_dotenv", lambda: None)


class TestLoadConfig:
    def test_defaults(self):
        config = load_config_from_env()

        assert config == CreativeAssistantConfig()
        assert config.text_context_window == 6
        assert config.prompt_context_lines == 4

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "OpenAI")
        monkeypatch.setenv("LLM_MODEL", "gpt-4o-mini")
        monkeypatch.setenv("TEXT_CONTEXT_WINDOW", "8")
        monkeypatch.setenv("VERBOSE", "true")

        config = load_config_from_env()

        assert config.llm_provider == "openai"
        assert config.llm_model == "gpt-4o-mini"
        assert config.text_context_window == 8
        assert config.verbose is True

    def test_unknown_provider(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "acme")
        with pytest.raises(ConfigurationError, match="LLM_PROVIDER"):
            load_config_from_env()

    @pytest.mark.parametrize("value", ["six", "0", "-2"])
    def test_invalid_integer(self, monkeypatch, value):
        monkeypatch.setenv("TEXT_CONTEXT_WINDOW", value)
        with pytest.raises(ConfigurationError, match="TEXT_CONTEXT_WINDOW"):
            load_config_from_env()


class TestValidator:
    def test_required_missing(self, monkeypatch):
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
        with pytest.raises(ConfigurationError, match="GROQ_API_KEY is required"):
            get_required_env("GROQ_API_KEY")

    def test_required_placeholder(self, monkeypatch):
        monkeypatch.setenv("GROQ_API_KEY", "your_groq_key_here")
        with pytest.raises(ConfigurationError, match="placeholder"):
            get_required_env("GROQ_API_KEY")

    def test_required_present(self, monkeypatch):
        monkeypatch.setenv("GROQ_API_KEY", "gsk_realistic_looking_key_123")
        assert get_required_env("GROQ_API_KEY") == "gsk_realistic_looking_key_123"

    def test_optional_placeholder_falls_back(self, monkeypatch):
        monkeypatch.setenv("IMAGE_MODEL", "placeholder")
        with pytest.warns(UserWarning):
            assert get_optional_env("IMAGE_MODEL", "dall-e-3") == "dall-e-3"

    def test_mask_secret(self):
        assert _mask_secret("short") == "***"
        assert _mask_secret("abcd1234efgh5678") == "abcd...5678"
