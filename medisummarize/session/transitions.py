"""Session state transitions as pure functions of (state, event).

Events produced by asynchronous work carry the generation they were started
against; when that generation is no longer current the event is stale and
the state is returned unchanged.
"""

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from medisummarize.ai.models import SummaryResult
from medisummarize.session.models import (
    ChatMessage,
    ReportState,
    ReportStatus,
    Sender,
    SessionState,
)


@dataclass(frozen=True)
class UploadStarted:
    source_name: str


@dataclass(frozen=True)
class ExtractionSucceeded:
    generation: int
    text: str


@dataclass(frozen=True)
class ExtractionFailed:
    generation: int
    message: str


@dataclass(frozen=True)
class TextEdited:
    text: str


@dataclass(frozen=True)
class SummaryRequested:
    pass


@dataclass(frozen=True)
class SummaryReceived:
    generation: int
    summary: SummaryResult


@dataclass(frozen=True)
class SummaryFailed:
    generation: int
    message: str


@dataclass(frozen=True)
class QuestionAsked:
    question: str


@dataclass(frozen=True)
class AnswerReceived:
    generation: int
    text: str
    error: str = ""


SessionEvent = (
    UploadStarted
    | ExtractionSucceeded
    | ExtractionFailed
    | TextEdited
    | SummaryRequested
    | SummaryReceived
    | SummaryFailed
    | QuestionAsked
    | AnswerReceived
)


def is_stale(state: SessionState, generation: int) -> bool:
    return generation != state.generation


def _new_snapshot(state: SessionState, report: ReportState, **changes: Any) -> SessionState:
    # A new canonical-text snapshot drops everything derived from the old one.
    return replace(
        state,
        report=report,
        summary=None,
        transcript=(),
        generation=state.generation + 1,
        summary_pending=False,
        chat_pending=False,
        last_error="",
        **changes,
    )


def _upload_started(state: SessionState, event: UploadStarted) -> SessionState:
    report = replace(state.report, status=ReportStatus.LOADING)
    return _new_snapshot(state, report, source_name=event.source_name)


def _extraction_succeeded(state: SessionState, event: ExtractionSucceeded) -> SessionState:
    if is_stale(state, event.generation):
        return state
    return replace(
        state,
        report=ReportState(
            canonical_text=event.text,
            display_text=event.text,
            status=ReportStatus.READY,
        ),
        summary=None,
        transcript=(),
    )


def _extraction_failed(state: SessionState, event: ExtractionFailed) -> SessionState:
    if is_stale(state, event.generation):
        return state
    return replace(
        state,
        report=replace(state.report, status=ReportStatus.ERROR),
        source_name="",
        last_error=event.message,
    )


def _text_edited(state: SessionState, event: TextEdited) -> SessionState:
    status = ReportStatus.READY if event.text.strip() else ReportStatus.EMPTY
    if (
        event.text == state.report.canonical_text
        and event.text == state.report.display_text
        and state.report.status is not ReportStatus.LOADING
    ):
        if state.report.status is not ReportStatus.ERROR:
            return state
        # Same snapshot, so summary and transcript stay valid.
        return replace(state, report=replace(state.report, status=status), last_error="")
    report = ReportState(canonical_text=event.text, display_text=event.text, status=status)
    return _new_snapshot(state, report, source_name="")


def _summary_requested(state: SessionState, event: SummaryRequested) -> SessionState:
    return replace(state, summary_pending=True, last_error="")


def _summary_received(state: SessionState, event: SummaryReceived) -> SessionState:
    if is_stale(state, event.generation):
        return state
    return replace(state, summary=event.summary, summary_pending=False)


def _summary_failed(state: SessionState, event: SummaryFailed) -> SessionState:
    if is_stale(state, event.generation):
        return state
    return replace(state, summary_pending=False, last_error=event.message)


def _question_asked(state: SessionState, event: QuestionAsked) -> SessionState:
    if state.chat_pending:
        raise ValueError("A question is already awaiting an answer")
    message = ChatMessage(sender=Sender.USER, text=event.question)
    return replace(state, transcript=(*state.transcript, message), chat_pending=True)


def _answer_received(state: SessionState, event: AnswerReceived) -> SessionState:
    if is_stale(state, event.generation) or not state.chat_pending:
        return state
    message = ChatMessage(sender=Sender.BOT, text=event.text)
    return replace(
        state,
        transcript=(*state.transcript, message),
        chat_pending=False,
        last_error=event.error or state.last_error,
    )


_HANDLERS: dict[type, Callable[[SessionState, Any], SessionState]] = {
    UploadStarted: _upload_started,
    ExtractionSucceeded: _extraction_succeeded,
    ExtractionFailed: _extraction_failed,
    TextEdited: _text_edited,
    SummaryRequested: _summary_requested,
    SummaryReceived: _summary_received,
    SummaryFailed: _summary_failed,
    QuestionAsked: _question_asked,
    AnswerReceived: _answer_received,
}


def reduce(state: SessionState, event: SessionEvent) -> SessionState:
    """Return the state that follows ``state`` once ``event`` has happened."""
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unknown session event: {type(event).__name__}")
    return handler(state, event)
