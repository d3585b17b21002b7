from unittest.mock import patch

import pytest

from training_generator.config.settings import Settings
from training_generator.generation.example_client_adapter import ExampleClientAdapter
from training_generator.generation.factory import ModelClientFactory


class TestModelClientFactory:
    def test_creates_example_adapter(self) -> None:
        client = ModelClientFactory.create(Settings(ai_provider="example"))
        assert isinstance(client, ExampleClientAdapter)

    def test_gemini_uses_openai_compatible_endpoint(self) -> None:
        settings = Settings(ai_provider="gemini", ai_api_key="g-key", ai_timeout_seconds=60)
        with patch("training_generator.generation.factory.OpenAIClientAdapter") as mock_adapter:
            ModelClientFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="g-key",
            timeout_seconds=60,
            base_url="https://generativelanguage.googleapis.com/v1beta/openai/",
        )

    def test_openai_uses_default_base_url(self) -> None:
        settings = Settings(ai_provider="OpenAI", ai_api_key="k")
        with patch("training_generator.generation.factory.OpenAIClientAdapter") as mock_adapter:
            ModelClientFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] is None

    def test_uses_provider_default_base_url_for_openrouter(self) -> None:
        settings = Settings(ai_provider="openrouter", ai_api_key="k")
        with patch("training_generator.generation.factory.OpenAIClientAdapter") as mock_adapter:
            ModelClientFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "https://openrouter.ai/api/v1"

    def test_base_url_overrides_provider_default(self) -> None:
        settings = Settings(ai_provider="ollama", ai_base_url="http://gpu-box:11434/v1")
        with patch("training_generator.generation.factory.OpenAIClientAdapter") as mock_adapter:
            ModelClientFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "http://gpu-box:11434/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        with pytest.raises(ValueError, match="ai_base_url is required"):
            ModelClientFactory.create(Settings(ai_provider="openai_compatible", ai_base_url=""))

    def test_openai_compatible_uses_base_url(self) -> None:
        settings = Settings(ai_provider="openai_compatible", ai_base_url="http://llm.local/v1")
        with patch("training_generator.generation.factory.OpenAIClientAdapter") as mock_adapter:
            ModelClientFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "http://llm.local/v1"

    def test_unknown_provider(self) -> None:
        with pytest.raises(ValueError, match="Unknown AI provider"):
            ModelClientFactory.create(Settings(ai_provider="nope"))
