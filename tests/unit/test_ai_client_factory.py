from unittest.mock import MagicMock, patch

import pytest

from medisummarize.ai.example_client_adapter import ExampleClientAdapter
from medisummarize.ai.factory import AIClientFactory
from medisummarize.ai.openai_client_adapter import OpenAIClientAdapter


def _make_settings(provider: str, base_url: str = "") -> MagicMock:
    return MagicMock(
        ai_provider=provider,
        ai_api_key="key",
        ai_base_url=base_url,
        ai_timeout_seconds=12,
    )


class TestAIClientFactory:
    def test_creates_example_adapter(self) -> None:
        client = AIClientFactory.create(_make_settings("example"))
        assert isinstance(client, ExampleClientAdapter)

    def test_creates_openai_adapter_without_base_url(self) -> None:
        with patch("medisummarize.ai.openai_client_adapter.openai.AsyncOpenAI") as mock_cls:
            client = AIClientFactory.create(_make_settings("OpenAI"))
        assert isinstance(client, OpenAIClientAdapter)
        mock_cls.assert_called_once_with(api_key="key", timeout=12, base_url=None)

    def test_uses_known_base_url_for_compatible_provider(self) -> None:
        with patch("medisummarize.ai.openai_client_adapter.openai.AsyncOpenAI") as mock_cls:
            AIClientFactory.create(_make_settings("openrouter"))
        assert mock_cls.call_args.kwargs["base_url"] == "https://openrouter.ai/api/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        with pytest.raises(ValueError, match="ai_base_url is required"):
            AIClientFactory.create(_make_settings("openai_compatible"))

    def test_openai_compatible_uses_configured_base_url(self) -> None:
        with patch("medisummarize.ai.openai_client_adapter.openai.AsyncOpenAI") as mock_cls:
            AIClientFactory.create(
                _make_settings("openai_compatible", base_url="http://llm.local/v1")
            )
        assert mock_cls.call_args.kwargs["base_url"] == "http://llm.local/v1"

    def test_raises_for_unknown_provider(self) -> None:
        with pytest.raises(ValueError, match="Unknown AI provider"):
            AIClientFactory.create(_make_settings("nonexistent"))
