"""Example AI client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAIClient and register the provider in AIClientFactory.
"""

from typing import ClassVar

from medisummarize.ai.client_base import BaseAIClient, UserContent


class ExampleClientAdapter(BaseAIClient):
    """Example adapter that answers every request with a fixed text.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[str] = (
        "Example response. Configure AI_PROVIDER to use a real model."
    )

    def __init__(self, response: str | None = None) -> None:
        self._response = self.DEFAULT_RESPONSE if response is None else response

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_content: UserContent,
    ) -> str:
        _ = model, temperature, system_prompt, user_content
        return self._response
