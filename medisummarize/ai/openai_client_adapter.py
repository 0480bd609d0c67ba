import httpx
import openai

from medisummarize.ai.client_base import BaseAIClient, UserContent
from medisummarize.ai.exceptions import AIEmptyResponseError, AINetworkError, AIProviderError


class OpenAIClientAdapter(BaseAIClient):
    """AI client adapter built on the OpenAI-compatible async chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_content: UserContent,
    ) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_content},  # type: ignore[misc]
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AINetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AIProviderError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AIEmptyResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AIEmptyResponseError("AI returned empty response")
        return content
