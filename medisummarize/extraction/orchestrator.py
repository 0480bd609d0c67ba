from collections.abc import Callable
from enum import Enum

from medisummarize.extraction.models import (
    ExtractionMethod,
    ExtractionResult,
    MimeKind,
    SourceFile,
)
from medisummarize.extraction.ocr_bridge import OcrBridge, to_data_uri
from medisummarize.extraction.scan_heuristic import (
    DEFAULT_MIN_FILE_SIZE_BYTES,
    DEFAULT_MIN_TEXT_CHARS,
    needs_ocr_fallback,
)
from medisummarize.extraction.text_extractor import TextExtractor, require_text
from medisummarize.logging.logger import Log

OCR_FALLBACK_WARNING = "PDF text layer was too sparse; text was recognized with OCR"


class ExtractionPhase(str, Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    OCR_FALLBACK = "ocr_fallback"
    DONE = "done"
    FAILED = "failed"


PhaseListener = Callable[[ExtractionPhase], None]


class ExtractionOrchestrator:
    """Runs one upload through native extraction and, for scanned PDFs, OCR.

    Phases: IDLE -> EXTRACTING -> [OCR_FALLBACK] -> DONE | FAILED.
    Errors are re-raised after entering FAILED; nothing is retried.
    """

    def __init__(
        self,
        *,
        text_extractor: TextExtractor,
        ocr_bridge: OcrBridge,
        min_text_chars: int = DEFAULT_MIN_TEXT_CHARS,
        min_file_size_bytes: int = DEFAULT_MIN_FILE_SIZE_BYTES,
    ) -> None:
        self._text_extractor = text_extractor
        self._ocr_bridge = ocr_bridge
        self._min_text_chars = min_text_chars
        self._min_file_size_bytes = min_file_size_bytes

    async def run(
        self,
        source: SourceFile,
        on_phase: PhaseListener | None = None,
    ) -> ExtractionResult:
        def enter(phase: ExtractionPhase) -> None:
            Log.debug(f"Extraction of '{source.name}': {phase.value}")
            if on_phase is not None:
                on_phase(phase)

        enter(ExtractionPhase.EXTRACTING)
        try:
            result = await self._text_extractor.extract_native(source)
            if source.mime_kind is MimeKind.PDF and needs_ocr_fallback(
                result.text,
                source.size_bytes,
                min_text_chars=self._min_text_chars,
                min_file_size_bytes=self._min_file_size_bytes,
            ):
                enter(ExtractionPhase.OCR_FALLBACK)
                result = await self._ocr_fallback(source, result)
            result = require_text(result)
        except Exception:
            enter(ExtractionPhase.FAILED)
            raise

        enter(ExtractionPhase.DONE)
        Log.info(
            f"Extraction of '{source.name}' done via {result.method.value}: "
            f"{len(result.text)} chars"
        )
        return result

    async def _ocr_fallback(
        self, source: SourceFile, native: ExtractionResult
    ) -> ExtractionResult:
        Log.warning(
            f"'{source.name}' is {source.size_bytes} bytes but yielded "
            f"{len(native.text.strip())} chars of text; falling back to OCR"
        )
        text = await self._ocr_bridge.recognize(
            to_data_uri(source.data, source.mime_type), filename=source.name
        )
        return ExtractionResult(
            text=text,
            method=ExtractionMethod.OCR,
            warnings=(*native.warnings, OCR_FALLBACK_WARNING),
            page_count=native.page_count,
        )
