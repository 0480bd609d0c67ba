DEFAULT_MIN_TEXT_CHARS = 50
DEFAULT_MIN_FILE_SIZE_BYTES = 10_000


def needs_ocr_fallback(
    pdf_text: str,
    file_size_bytes: int,
    *,
    min_text_chars: int = DEFAULT_MIN_TEXT_CHARS,
    min_file_size_bytes: int = DEFAULT_MIN_FILE_SIZE_BYTES,
) -> bool:
    """Decide whether a PDF's native text layer is too sparse to trust.

    A large file that yields almost no text is most likely a scan without a
    text layer. A small file with little text is taken at face value.
    """
    return (
        len(pdf_text.strip()) < min_text_chars
        and file_size_bytes > min_file_size_bytes
    )
