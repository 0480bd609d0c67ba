"""OCR through a vision-capable chat model."""

import base64
import re
from pathlib import Path

from medisummarize.ai.client_base import BaseAIClient
from medisummarize.ai.exceptions import AIEmptyResponseError
from medisummarize.ai.prompt_loader import load_prompt_template
from medisummarize.extraction.exceptions import InvalidDataUriError, OcrEmptyResultError
from medisummarize.logging.logger import Log

OCR_SYSTEM_PROMPT = (
    "You are an OCR engine. Return only the text found in the document, "
    "without commentary."
)

_DATA_URI = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)(?:;[\w.+-]+=[\w.+-]+)*;base64,(?P<payload>[A-Za-z0-9+/=\s]+)$"
)


def to_data_uri(data: bytes, mime_type: str) -> str:
    """Encode raw bytes as ``data:<mime>;base64,<payload>``."""
    mime = mime_type.split(";", 1)[0].strip().lower()
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


def data_uri_mime_type(data_uri: str) -> str:
    """Return the MIME type of a data URI.

    Raises:
        InvalidDataUriError: if the value is not a base64 data URI with a MIME type.
    """
    match = _DATA_URI.match(data_uri)
    if match is None:
        raise InvalidDataUriError(
            "OCR input must be a base64 data URI: data:<mimetype>;base64,<data>"
        )
    return match.group("mime").lower()


class OcrBridge:
    """Wraps the remote OCR operation and rejects empty results."""

    def __init__(
        self,
        *,
        client: BaseAIClient,
        model: str,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._prompt = load_prompt_template("ocr", prompt_template_path)

    async def recognize(self, data_uri: str, filename: str = "document") -> str:
        """Return the text visible in the document encoded by ``data_uri``.

        Images are sent as image parts, anything else (a whole PDF in the
        scanned-document fallback) as a file part.

        Raises:
            InvalidDataUriError: on malformed input.
            OcrEmptyResultError: when the model finds no text.
            AINetworkError: on transport failures.
            AIProviderError: when the provider rejects the request.
        """
        mime_type = data_uri_mime_type(data_uri)
        Log.info(f"Sending {mime_type} document '{filename}' to OCR")

        try:
            raw = await self._client.create_chat_completion(
                model=self._model,
                temperature=0.0,
                system_prompt=OCR_SYSTEM_PROMPT,
                user_content=[
                    self._document_part(data_uri, mime_type, filename),
                    {"type": "text", "text": self._prompt},
                ],
            )
        except AIEmptyResponseError as exc:
            raise OcrEmptyResultError(f"OCR returned no text for '{filename}'") from exc

        text = raw.strip()
        if not text:
            Log.warning(f"OCR returned no text for '{filename}'")
            raise OcrEmptyResultError(f"OCR returned no text for '{filename}'")
        Log.info(f"OCR extracted {len(text)} chars from '{filename}'")
        return text

    @staticmethod
    def _document_part(data_uri: str, mime_type: str, filename: str) -> dict[str, object]:
        if mime_type.startswith("image/"):
            return {"type": "image_url", "image_url": {"url": data_uri}}
        return {"type": "file", "file": {"filename": filename, "file_data": data_uri}}
