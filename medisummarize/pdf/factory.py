from typing import ClassVar

from medisummarize.config.settings import Settings
from medisummarize.logging.logger import Log
from medisummarize.pdf.base import BasePdfExtractor
from medisummarize.pdf.pdfplumber_adapter import PdfPlumberAdapter
from medisummarize.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the native PDF text adapter named by settings.pdf_engine."""

    ADAPTERS: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        Log.debug(f"Using PDF engine '{engine}'")
        return adapter_cls()
