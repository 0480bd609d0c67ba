"""Question answering grounded in a single report."""

from pathlib import Path

from medisummarize.ai.client_base import BaseAIClient
from medisummarize.ai.exceptions import AIError, AINetworkError, ChatError
from medisummarize.ai.prompt_loader import load_prompt_template
from medisummarize.ai.report_text import DEFAULT_MAX_REPORT_CHARS, truncate_report
from medisummarize.logging.logger import Log

REFUSAL_PHRASE = "I cannot answer that question based on the provided report."

CHAT_SYSTEM_PROMPT = (
    "You are a helpful medical assistant AI. You will answer questions based "
    "*only* on the provided medical report context. Do not use any external "
    "knowledge or make assumptions beyond what is stated in the report. If the "
    "answer cannot be found in the report, state that clearly."
)


class ReportChat:
    """Answers questions using only the text of the current report."""

    def __init__(
        self,
        *,
        client: BaseAIClient,
        model: str,
        temperature: float = 0.2,
        max_report_chars: int = DEFAULT_MAX_REPORT_CHARS,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._max_report_chars = max_report_chars
        self._prompt_template = load_prompt_template("chat", prompt_template_path)

    async def ask(self, report_text: str, question: str) -> str:
        """Answer ``question`` from ``report_text``.

        Raises:
            ChatError: for blank inputs, an empty answer or a remote failure.
            AINetworkError: on transport failures.
        """
        if not report_text.strip():
            raise ChatError("Report text must not be blank")
        if not question.strip():
            raise ChatError("Question must not be blank")

        prompt = self._prompt_template.format(
            report_text=truncate_report(report_text, self._max_report_chars),
            question=question.strip(),
            refusal=REFUSAL_PHRASE,
        )
        Log.debug(f"Chat prompt:\n{prompt}")

        try:
            raw = await self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=CHAT_SYSTEM_PROMPT,
                user_content=prompt,
            )
        except AINetworkError:
            raise
        except AIError as exc:
            raise ChatError(f"Chat failed: {exc}") from exc

        answer = raw.strip()
        if not answer:
            raise ChatError("Chat returned an empty answer")
        return answer
