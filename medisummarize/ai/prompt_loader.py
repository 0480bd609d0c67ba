from pathlib import Path

from medisummarize.ai.exceptions import AIError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(name: str, path: Path | None = None) -> str:
    """Load a prompt template from a file.

    Args:
        name: Base name of a bundled template (``summarize``, ``chat``, ``ocr``),
              used when ``path`` is not given.
        path: Explicit path to a template file.

    Returns:
        The raw template string with placeholders.

    Raises:
        AIError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / f"{name}_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AIError(f"Failed to load prompt template: {exc}") from exc
