from medisummarize.logging.logger import Log

DEFAULT_MAX_REPORT_CHARS = 30_000


def truncate_report(text: str, max_chars: int = DEFAULT_MAX_REPORT_CHARS) -> str:
    """Cut report text to the model input cap, logging when anything is dropped."""
    if len(text) <= max_chars:
        return text
    Log.warning(
        f"Report text truncated from {len(text)} to {max_chars} characters"
    )
    return text[:max_chars]
