"""AI-powered medical report summarizer."""

from pathlib import Path

from medisummarize.ai.client_base import BaseAIClient
from medisummarize.ai.exceptions import AIError, AINetworkError, SummarizationError
from medisummarize.ai.models import SummaryResult
from medisummarize.ai.prompt_loader import load_prompt_template
from medisummarize.ai.report_text import DEFAULT_MAX_REPORT_CHARS, truncate_report
from medisummarize.logging.logger import Log

SUMMARY_SYSTEM_PROMPT = (
    "You are a medical expert specializing in summarizing medical reports."
)


class ReportSummarizer:
    """Produces a one-shot summary of a report through an AI provider."""

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
        self._prompt_template = load_prompt_template("summarize", prompt_template_path)

    async def summarize(self, report_text: str) -> SummaryResult:
        """Summarize the report text.

        Raises:
            AINetworkError: on transport failures.
            SummarizationError: on any other remote failure or a blank summary.
        """
        prompt = self._prompt_template.format(
            report_text=truncate_report(report_text, self._max_report_chars)
        )
        Log.debug(f"Summarization prompt:\n{prompt}")

        try:
            raw = await self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=SUMMARY_SYSTEM_PROMPT,
                user_content=prompt,
            )
        except AINetworkError:
            raise
        except AIError as exc:
            raise SummarizationError(f"Summarization failed: {exc}") from exc

        summary = raw.strip()
        if not summary:
            raise SummarizationError("Summarization returned an empty summary")
        Log.info(f"Summarization complete: {len(summary)} chars")
        return SummaryResult(summary=summary)
