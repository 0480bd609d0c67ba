from dataclasses import dataclass, field


@dataclass(frozen=True)
class PdfPage:
    """Text items of one PDF page, in reading order."""

    number: int
    items: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return " ".join(self.items)


@dataclass(frozen=True)
class PdfText:
    """Native text layer of a whole document, pages in document order."""

    pages: tuple[PdfPage, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        return "\n".join(page.text for page in self.pages)

    @property
    def page_count(self) -> int:
        return len(self.pages)
