class AIError(Exception):
    """Base exception for failures of the remote AI operations."""


class AINetworkError(AIError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class AIEmptyResponseError(AIError):
    """Raised when the AI provider answers without any content."""


class SummarizationError(AIError):
    """Raised when a report summary cannot be produced."""


class ChatError(AIError):
    """Raised when a question about the report cannot be answered."""


class AIProviderError(AIError):
    """Raised when the AI provider rejects or fails the request (4xx/5xx, bad payload)."""
