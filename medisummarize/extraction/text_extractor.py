import asyncio
import string

from medisummarize.extraction.exceptions import (
    EmptyExtractionError,
    ExtractionError,
    UnsupportedTypeError,
)
from medisummarize.extraction.models import (
    ExtractionMethod,
    ExtractionResult,
    MimeKind,
    SourceFile,
)
from medisummarize.extraction.ocr_bridge import OcrBridge, to_data_uri
from medisummarize.logging.logger import Log
from medisummarize.pdf.base import BasePdfExtractor
from medisummarize.pdf.exceptions import PdfExtractionError
from medisummarize.pdf.models import PdfPage

# Pages with fewer text items than this are checked for garbled characters.
LOW_ITEM_PAGE_THRESHOLD = 10

_PLAIN_CHARS = frozenset(string.printable)


def require_text(result: ExtractionResult) -> ExtractionResult:
    """Reject results that would hand blank grounding text to the AI operations."""
    if not result.text.strip():
        raise EmptyExtractionError("No text could be extracted from the file")
    return result


def suspicious_page_warnings(pages: tuple[PdfPage, ...]) -> tuple[str, ...]:
    """Flag sparse pages containing characters outside printable ASCII and whitespace."""
    warnings = []
    for page in pages:
        if len(page.items) >= LOW_ITEM_PAGE_THRESHOLD:
            continue
        odd = sorted({ch for ch in page.text if ch not in _PLAIN_CHARS})
        if odd:
            warnings.append(
                f"Page {page.number}: {len(page.items)} text items with "
                f"{len(odd)} unusual characters, text layer may be badly decoded"
            )
    return tuple(warnings)


class TextExtractor:
    """Turns an uploaded file into plain text, per MIME kind."""

    def __init__(self, pdf_extractor: BasePdfExtractor, ocr_bridge: OcrBridge) -> None:
        self._pdf_extractor = pdf_extractor
        self._ocr_bridge = ocr_bridge

    async def extract(self, source: SourceFile) -> ExtractionResult:
        """Extract text from ``source``.

        Raises:
            UnsupportedTypeError: if the MIME type is not text, PDF or image.
            EmptyExtractionError: if the extracted text is blank.
        """
        return require_text(await self.extract_native(source))

    async def extract_native(self, source: SourceFile) -> ExtractionResult:
        """Dispatch on MIME kind without judging the amount of text found."""
        if source.mime_kind is MimeKind.PLAIN_TEXT:
            return self._extract_plain_text(source)
        if source.mime_kind is MimeKind.PDF:
            return await self._extract_pdf(source)
        if source.mime_kind is MimeKind.IMAGE:
            return await self._extract_image(source)
        raise UnsupportedTypeError(
            f"Unsupported file type '{source.mime_type}'. "
            "Please upload a .txt, .pdf or image file."
        )

    def _extract_plain_text(self, source: SourceFile) -> ExtractionResult:
        text = source.data.decode("utf-8-sig", errors="replace")
        Log.info(f"Read {len(text)} chars from text file '{source.name}'")
        return ExtractionResult(text=text, method=ExtractionMethod.DIRECT)

    async def _extract_pdf(self, source: SourceFile) -> ExtractionResult:
        try:
            pdf_text = await asyncio.to_thread(self._pdf_extractor.extract, source.data)
        except PdfExtractionError as exc:
            raise ExtractionError(f"Could not read PDF '{source.name}': {exc}") from exc

        warnings = suspicious_page_warnings(pdf_text.pages)
        for warning in warnings:
            Log.warning(f"{source.name}: {warning}")
        text = pdf_text.text
        Log.info(
            f"Extracted {len(text)} chars from {pdf_text.page_count} pages of '{source.name}'"
        )
        return ExtractionResult(
            text=text,
            method=ExtractionMethod.PDF_NATIVE,
            warnings=warnings,
            page_count=pdf_text.page_count,
        )

    async def _extract_image(self, source: SourceFile) -> ExtractionResult:
        text = await self._ocr_bridge.recognize(
            to_data_uri(source.data, source.mime_type), filename=source.name
        )
        return ExtractionResult(text=text, method=ExtractionMethod.OCR)
