from dataclasses import dataclass
from enum import Enum

from medisummarize.ai.exceptions import (
    AINetworkError,
    AIProviderError,
    ChatError,
    SummarizationError,
)
from medisummarize.extraction.exceptions import (
    EmptyExtractionError,
    ExtractionError,
    InvalidDataUriError,
    OcrEmptyResultError,
    UnsupportedTypeError,
)


class NotificationLevel(str, Enum):
    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """Short user-facing message about the outcome of an operation."""

    title: str
    description: str
    level: NotificationLevel = NotificationLevel.INFO


# Checked in order, most specific first.
_ERROR_MESSAGES: tuple[tuple[type[Exception], str, str], ...] = (
    (
        UnsupportedTypeError,
        "Unsupported File",
        "Please upload a .txt, .pdf or image file.",
    ),
    (
        EmptyExtractionError,
        "No Text Found",
        "No text could be extracted from the file.",
    ),
    (
        OcrEmptyResultError,
        "Text Recognition Failed",
        "No readable text was found in the document.",
    ),
    (
        InvalidDataUriError,
        "Error Reading File",
        "The file could not be prepared for text recognition.",
    ),
    (
        ExtractionError,
        "Error Reading File",
        "Could not read the uploaded file.",
    ),
    (
        AINetworkError,
        "Connection Problem",
        "The AI service could not be reached. Please try again.",
    ),
    (
        SummarizationError,
        "Summarization Error",
        "An error occurred while summarizing the report.",
    ),
    (
        ChatError,
        "Chat Error",
        "An error occurred while answering your question.",
    ),
    (
        AIProviderError,
        "AI Service Error",
        "The AI service rejected the request. Check the provider settings.",
    ),
)

NO_REPORT_TEXT = Notification(
    title="No Report Text",
    description="Please upload a valid file or paste the report text.",
    level=NotificationLevel.ERROR,
)
REPORT_LOADING = Notification(
    title="Report Loading",
    description="Please wait until the report has been processed.",
    level=NotificationLevel.ERROR,
)
CHAT_BUSY = Notification(
    title="Please Wait",
    description="The previous question is still being answered.",
    level=NotificationLevel.ERROR,
)
REPORT_LOADED = Notification(
    title="Report Loaded",
    description="The report text is ready.",
)
SUMMARY_COMPLETE = Notification(
    title="Summarization Complete",
    description="The report has been successfully summarized.",
)


def notification_for_error(exc: Exception) -> Notification:
    """Map a caught error to the notification shown to the user."""
    for error_type, title, description in _ERROR_MESSAGES:
        if isinstance(exc, error_type):
            return Notification(title, description, NotificationLevel.ERROR)
    return Notification(
        "Unexpected Error",
        "Something went wrong. Please try again.",
        NotificationLevel.ERROR,
    )
