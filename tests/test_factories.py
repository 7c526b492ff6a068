"""
Tests for the LLM and image generator factories.
"""
from unittest.mock import patch

import pytest

from creative_assistant.config import CreativeAssistantConfig
from creative_assistant.exceptions import ConfigurationError
from creative_assistant.generation import DallEImageGenerator
from creative_assistant.image_factory import create_image_generator
from creative_assistant.llm_factory import get_llm_instance


class TestLLMFactory:
    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown LLM provider"):
            get_llm_instance("acme", "model")

    def test_groq_requires_key(self, monkeypatch):
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
        with pytest.raises(ConfigurationError, match="GROQ_API_KEY"):
            get_llm_instance("groq", "llama-3.1-8b-instant")

    def test_openai_model(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test-abcdefghijklmnopqrstuvwxyz")
        with patch("creative_assistant.llm_factory.ChatOpenAI") as chat_openai:
            llm = get_llm_instance("OpenAI", "gpt-4o-mini")

        chat_openai.assert_called_once_with(
            model="gpt-4o-mini",
            api_key="sk-test-abcdefghijklmnopqrstuvwxyz",
            streaming=False,
        )
        assert llm is chat_openai.return_value


class TestImageFactory:
    def test_requires_openai_key(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
            create_image_generator(CreativeAssistantConfig())

    def test_builds_generator(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test-abcdefghijklmnopqrstuvwxyz")
        config = CreativeAssistantConfig(image_model="dall-e-2", image_size="512x512")

        with patch("creative_assistant.image_factory.DallEAPIWrapper") as wrapper:
            generator = create_image_generator(config)

        wrapper.assert_called_once_with(
            model="dall-e-2",
            size="512x512",
            api_key="sk-test-abcdefghijklmnopqrstuvwxyz",
        )
        assert isinstance(generator, DallEImageGenerator)
