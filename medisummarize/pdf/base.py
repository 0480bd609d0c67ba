from abc import ABC, abstractmethod

from medisummarize.pdf.models import PdfText


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> PdfText:
        """Extract the native text layer from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            PdfText with one PdfPage per page (1..N), each holding the
            page's text items in reading order.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
