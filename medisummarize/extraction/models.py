import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class MimeKind(str, Enum):
    PLAIN_TEXT = "plain_text"
    PDF = "pdf"
    IMAGE = "image"
    UNSUPPORTED = "unsupported"


class ExtractionMethod(str, Enum):
    DIRECT = "direct"
    PDF_NATIVE = "pdf_native"
    OCR = "ocr"


def classify_mime(mime_type: str) -> MimeKind:
    """Map a declared MIME type to the extraction path that handles it."""
    essence = mime_type.split(";", 1)[0].strip().lower()
    if essence == "text/plain":
        return MimeKind.PLAIN_TEXT
    if essence == "application/pdf":
        return MimeKind.PDF
    if essence.startswith("image/") and len(essence) > len("image/"):
        return MimeKind.IMAGE
    return MimeKind.UNSUPPORTED


@dataclass(frozen=True)
class SourceFile:
    """An uploaded report file, as selected by the user."""

    name: str
    mime_type: str
    mime_kind: MimeKind
    data: bytes

    @property
    def size_bytes(self) -> int:
        return len(self.data)

    @classmethod
    def from_bytes(cls, name: str, data: bytes, mime_type: str) -> "SourceFile":
        return cls(
            name=name,
            mime_type=mime_type,
            mime_kind=classify_mime(mime_type),
            data=data,
        )

    @classmethod
    def from_path(cls, path: Path, mime_type: str | None = None) -> "SourceFile":
        """Read a file from disk, guessing its MIME type from the name if not given."""
        if mime_type is None:
            mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        return cls.from_bytes(path.name, path.read_bytes(), mime_type)


@dataclass(frozen=True)
class ExtractionResult:
    """Text acquired from one SourceFile."""

    text: str
    method: ExtractionMethod
    warnings: tuple[str, ...] = ()
    page_count: int | None = None
