from collections.abc import Callable

from medisummarize.ai.client_base import BaseAIClient
from medisummarize.ai.exceptions import AIError
from medisummarize.ai.factory import AIClientFactory
from medisummarize.ai.report_chat import ReportChat
from medisummarize.ai.summarizer import ReportSummarizer
from medisummarize.config.settings import Settings
from medisummarize.extraction.exceptions import ExtractionError, UnsupportedTypeError
from medisummarize.extraction.models import MimeKind, SourceFile
from medisummarize.extraction.ocr_bridge import OcrBridge
from medisummarize.extraction.orchestrator import ExtractionOrchestrator
from medisummarize.extraction.text_extractor import TextExtractor
from medisummarize.logging.logger import Log
from medisummarize.pdf.exceptions import PdfExtractionError
from medisummarize.pdf.factory import PdfExtractorFactory
from medisummarize.session.models import ChatMessage, ReportStatus, SessionState
from medisummarize.session.notifications import (
    CHAT_BUSY,
    NO_REPORT_TEXT,
    REPORT_LOADED,
    REPORT_LOADING,
    SUMMARY_COMPLETE,
    Notification,
    notification_for_error,
)
from medisummarize.session.transitions import (
    AnswerReceived,
    ExtractionFailed,
    ExtractionSucceeded,
    QuestionAsked,
    SessionEvent,
    SummaryFailed,
    SummaryReceived,
    SummaryRequested,
    TextEdited,
    UploadStarted,
    is_stale,
    reduce,
)

CHAT_APOLOGY = "Sorry, I couldn't answer that question right now. Please try again."

Notifier = Callable[[Notification], None]


class ReportController:
    """Owns the session state of the single live report.

    Every operation catches its own errors, rolls the state back through a
    failure event and reports a Notification. Results computed against a
    superseded report (older generation) are dropped.
    """

    def __init__(
        self,
        *,
        orchestrator: ExtractionOrchestrator,
        summarizer: ReportSummarizer,
        chat: ReportChat,
        notifier: Notifier | None = None,
    ) -> None:
        self._orchestrator = orchestrator
        self._summarizer = summarizer
        self._chat = chat
        self._notifier = notifier
        self._state = SessionState()
        # Outlives the transcript snapshot: a new report does not end the remote call.
        self._chat_in_flight = False

    @property
    def state(self) -> SessionState:
        return self._state

    async def upload(self, source: SourceFile) -> SessionState:
        """Replace the report with the text extracted from ``source``.

        Unsupported file types are refused before the current report is touched.
        """
        if source.mime_kind is MimeKind.UNSUPPORTED:
            Log.warning(f"Rejected upload of '{source.name}' ({source.mime_type})")
            self._notify(
                notification_for_error(
                    UnsupportedTypeError(f"Unsupported file type '{source.mime_type}'")
                )
            )
            return self._state

        self._dispatch(UploadStarted(source_name=source.name))
        generation = self._state.generation
        Log.info(f"Upload of '{source.name}' started (generation {generation})")

        try:
            result = await self._orchestrator.run(source)
        except Exception as exc:
            self._log_failure(f"Extraction of '{source.name}'", exc)
            if self._drop_if_stale(generation, "extraction failure"):
                return self._state
            self._dispatch(ExtractionFailed(generation=generation, message=str(exc)))
            self._notify(notification_for_error(exc))
            return self._state

        if self._drop_if_stale(generation, "extraction result"):
            return self._state
        self._dispatch(ExtractionSucceeded(generation=generation, text=result.text))
        self._notify(REPORT_LOADED)
        return self._state

    def edit_text(self, text: str) -> SessionState:
        """Apply a manual edit; the edited text becomes the canonical text."""
        self._dispatch(TextEdited(text=text))
        return self._state

    async def summarize(self) -> SessionState:
        if not self._ready_for_query():
            return self._state

        generation = self._state.generation
        report_text = self._state.report.canonical_text
        self._dispatch(SummaryRequested())

        try:
            summary = await self._summarizer.summarize(report_text)
        except Exception as exc:
            self._log_failure("Summarization", exc)
            if self._drop_if_stale(generation, "summarization failure"):
                return self._state
            self._dispatch(SummaryFailed(generation=generation, message=str(exc)))
            self._notify(notification_for_error(exc))
            return self._state

        if self._drop_if_stale(generation, "summary"):
            return self._state
        self._dispatch(SummaryReceived(generation=generation, summary=summary))
        self._notify(SUMMARY_COMPLETE)
        return self._state

    async def ask(self, question: str) -> ChatMessage | None:
        """Ask a question about the report.

        Returns the bot reply appended to the transcript, or None when the
        question was not sent or its answer arrived for a superseded report.
        """
        if not question.strip():
            return None
        if self._chat_in_flight:
            self._notify(CHAT_BUSY)
            return None
        if not self._ready_for_query():
            return None

        generation = self._state.generation
        report_text = self._state.report.canonical_text
        self._dispatch(QuestionAsked(question=question))

        self._chat_in_flight = True
        try:
            answer = await self._chat.ask(report_text, question)
            event = AnswerReceived(generation=generation, text=answer)
        except Exception as exc:
            self._log_failure("Chat", exc)
            event = AnswerReceived(generation=generation, text=CHAT_APOLOGY, error=str(exc))
            if not is_stale(self._state, generation):
                self._notify(notification_for_error(exc))
        finally:
            self._chat_in_flight = False

        if self._drop_if_stale(generation, "chat answer"):
            return None
        self._dispatch(event)
        return self._state.transcript[-1]

    def _ready_for_query(self) -> bool:
        if self._state.report.status is ReportStatus.LOADING:
            self._notify(REPORT_LOADING)
            return False
        if not self._state.has_text:
            self._notify(NO_REPORT_TEXT)
            return False
        return True

    @staticmethod
    def _log_failure(what: str, exc: Exception) -> None:
        if isinstance(exc, (ExtractionError, PdfExtractionError, AIError)):
            Log.error(f"{what} failed: {exc}")
        else:
            Log.exception(f"{what} failed unexpectedly: {exc}")

    def _dispatch(self, event: SessionEvent) -> None:
        self._state = reduce(self._state, event)

    def _drop_if_stale(self, generation: int, what: str) -> bool:
        if is_stale(self._state, generation):
            Log.warning(
                f"Discarding stale {what} for generation {generation} "
                f"(current {self._state.generation})"
            )
            return True
        return False

    def _notify(self, notification: Notification) -> None:
        Log.info(f"Notification: {notification.title}: {notification.description}")
        if self._notifier is not None:
            self._notifier(notification)


def build_controller(
    settings: Settings,
    client: BaseAIClient | None = None,
    notifier: Notifier | None = None,
) -> ReportController:
    """Build a ReportController with all required adapters."""
    if client is None:
        client = AIClientFactory.create(settings)
    ocr_bridge = OcrBridge(client=client, model=settings.ocr_model_name)
    text_extractor = TextExtractor(
        pdf_extractor=PdfExtractorFactory.create(settings),
        ocr_bridge=ocr_bridge,
    )
    orchestrator = ExtractionOrchestrator(
        text_extractor=text_extractor,
        ocr_bridge=ocr_bridge,
        min_text_chars=settings.ocr_min_text_chars,
        min_file_size_bytes=settings.ocr_min_file_size_bytes,
    )
    summarizer = ReportSummarizer(
        client=client,
        model=settings.summary_model_name,
        temperature=settings.ai_temperature,
        max_report_chars=settings.max_report_chars,
    )
    chat = ReportChat(
        client=client,
        model=settings.chat_model_name,
        temperature=settings.ai_temperature,
        max_report_chars=settings.max_report_chars,
    )
    return ReportController(
        orchestrator=orchestrator,
        summarizer=summarizer,
        chat=chat,
        notifier=notifier,
    )
