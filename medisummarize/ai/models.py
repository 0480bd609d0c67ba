from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryResult:
    """Output of the summarization operation."""

    summary: str
