import pymupdf

from medisummarize.pdf.base import BasePdfExtractor
from medisummarize.pdf.exceptions import PdfExtractionError
from medisummarize.pdf.models import PdfPage, PdfText

# Index of the word string in the tuples returned by page.get_text("words").
_WORD_TEXT = 4


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> PdfText:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [
                    PdfPage(
                        number=index,
                        items=tuple(word[_WORD_TEXT] for word in page.get_text("words")),
                    )
                    for index, page in enumerate(doc, start=1)
                ]
            return PdfText(pages=tuple(pages))
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
