from abc import ABC, abstractmethod

UserContent = str | list[dict[str, object]]


class BaseAIClient(ABC):
    """Contract for provider-specific chat-completion clients."""

    @abstractmethod
    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_content: UserContent,
    ) -> str:
        """Return provider response as plain text.

        ``user_content`` is either a plain prompt or a list of OpenAI-style
        content parts (text, image_url, file).
        """
