import io

import pdfplumber

from medisummarize.pdf.base import BasePdfExtractor
from medisummarize.pdf.exceptions import PdfExtractionError
from medisummarize.pdf.models import PdfPage, PdfText


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> PdfText:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [
                    PdfPage(
                        number=index,
                        items=tuple(word["text"] for word in page.extract_words()),
                    )
                    for index, page in enumerate(pdf.pages, start=1)
                ]
            return PdfText(pages=tuple(pages))
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
