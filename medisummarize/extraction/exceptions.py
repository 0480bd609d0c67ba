class ExtractionError(Exception):
    """Base exception for all text-acquisition errors."""


class UnsupportedTypeError(ExtractionError):
    """Raised when an uploaded file has a MIME type we cannot read."""


class EmptyExtractionError(ExtractionError):
    """Raised when extraction yields only whitespace."""


class OcrEmptyResultError(ExtractionError):
    """Raised when OCR finds no text in the submitted document."""


class InvalidDataUriError(ExtractionError):
    """Raised when OCR input is not a base64 data URI with a MIME type."""
