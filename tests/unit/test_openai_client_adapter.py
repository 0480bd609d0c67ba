from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from medisummarize.ai.exceptions import AIEmptyResponseError, AINetworkError, AIProviderError
from medisummarize.ai.openai_client_adapter import OpenAIClientAdapter


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _make_adapter(mock_client: MagicMock) -> OpenAIClientAdapter:
    with patch(
        "medisummarize.ai.openai_client_adapter.openai.AsyncOpenAI",
        return_value=mock_client,
    ):
        return OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)


async def _complete(adapter: OpenAIClientAdapter) -> str:
    return await adapter.create_chat_completion(
        model="m",
        temperature=0.1,
        system_prompt="system",
        user_content="user",
    )


class TestOpenAIClientAdapter:
    @pytest.mark.asyncio
    async def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            return_value=_make_mock_response("Summary text")
        )
        adapter = _make_adapter(mock_client)
        assert await _complete(adapter) == "Summary text"

    @pytest.mark.asyncio
    async def test_sends_system_and_user_messages(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            return_value=_make_mock_response("ok")
        )
        adapter = _make_adapter(mock_client)
        parts = [{"type": "text", "text": "read this"}]
        await adapter.create_chat_completion(
            model="vision", temperature=0.0, system_prompt="sys", user_content=parts
        )
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "vision"
        assert kwargs["temperature"] == 0.0
        assert kwargs["messages"] == [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": parts},
        ]

    @pytest.mark.asyncio
    async def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            return_value=_make_mock_response(None)
        )
        adapter = _make_adapter(mock_client)
        with pytest.raises(AIEmptyResponseError, match="empty response"):
            await _complete(adapter)

    @pytest.mark.asyncio
    async def test_raises_error_for_no_choices(self) -> None:
        mock_client = MagicMock()
        response = MagicMock()
        response.choices = []
        mock_client.chat.completions.create = AsyncMock(return_value=response)
        adapter = _make_adapter(mock_client)
        with pytest.raises(AIEmptyResponseError, match="no choices"):
            await _complete(adapter)

    @pytest.mark.asyncio
    async def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            side_effect=openai.APIConnectionError(request=MagicMock())
        )
        adapter = _make_adapter(mock_client)
        with pytest.raises(AINetworkError, match="network error"):
            await _complete(adapter)

    @pytest.mark.asyncio
    async def test_raises_network_error_on_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            side_effect=httpx.TimeoutException("timeout")
        )
        adapter = _make_adapter(mock_client)
        with pytest.raises(AINetworkError, match="network error"):
            await _complete(adapter)

    @pytest.mark.asyncio
    async def test_raises_provider_error_on_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            side_effect=openai.APIError(message="server error", request=MagicMock(), body=None)
        )
        adapter = _make_adapter(mock_client)
        with pytest.raises(AIProviderError, match="API error"):
            await _complete(adapter)

    @pytest.mark.asyncio
    async def test_rejected_api_key_is_not_a_network_error(self) -> None:
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            side_effect=openai.AuthenticationError(
                "bad key", response=httpx.Response(401, request=request), body=None
            )
        )
        adapter = _make_adapter(mock_client)
        with pytest.raises(AIProviderError, match="bad key") as exc_info:
            await _complete(adapter)
        assert not isinstance(exc_info.value, AINetworkError)
