from dataclasses import dataclass
from enum import Enum

from medisummarize.ai.models import SummaryResult


class ReportStatus(str, Enum):
    EMPTY = "empty"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class Sender(str, Enum):
    USER = "user"
    BOT = "bot"


@dataclass(frozen=True)
class ChatMessage:
    sender: Sender
    text: str


@dataclass(frozen=True)
class ReportState:
    """Report text as handed to the AI operations and as shown for editing."""

    canonical_text: str = ""
    display_text: str = ""
    status: ReportStatus = ReportStatus.EMPTY


@dataclass(frozen=True)
class SessionState:
    """Everything the assistant knows about the single live report.

    ``summary`` and ``transcript`` belong to the canonical-text snapshot
    numbered ``generation``.
    """

    report: ReportState = ReportState()
    summary: SummaryResult | None = None
    transcript: tuple[ChatMessage, ...] = ()
    generation: int = 0
    source_name: str = ""
    summary_pending: bool = False
    chat_pending: bool = False
    last_error: str = ""

    @property
    def has_text(self) -> bool:
        return bool(self.report.canonical_text.strip())

    @property
    def can_query(self) -> bool:
        """Whether summarize/ask may be started against the current snapshot."""
        return self.has_text and self.report.status is not ReportStatus.LOADING
