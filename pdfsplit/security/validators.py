from pdfsplit.config import MAX_FILE_SIZE, MAX_PAGES

ALLOWED_PDF_CONTENT_TYPES = (
    "application/pdf",
    "application/octet-stream",
    "application/x-pdf",
)
ALLOWED_PDF_EXTENSIONS = (".pdf",)


def validate_upload(upload_file) -> None:
    """Raise ValueError unless the content type or the filename says PDF."""
    ct = (upload_file.content_type or "").strip().lower()
    fn = (upload_file.filename or "").lower()
    has_valid_ext = fn and any(fn.endswith(ext) for ext in ALLOWED_PDF_EXTENSIONS)
    has_valid_ct = ct and ct in ALLOWED_PDF_CONTENT_TYPES
    # Either is enough; some clients send a generic content type for PDFs
    if has_valid_ct or has_valid_ext:
        return
    if ct and not has_valid_ext:
        raise ValueError("Invalid file type. Expected PDF.")
    if fn:
        raise ValueError(f"Invalid file. Expected PDF (e.g. {', '.join(ALLOWED_PDF_EXTENSIONS)}).")
    raise ValueError("Invalid file: missing filename and content type.")


def validate_file_size(size: int, max_size: int = MAX_FILE_SIZE) -> None:
    """Raise ValueError if size exceeds max_size (default MAX_FILE_SIZE)."""
    if size <= 0:
        raise ValueError("File is empty.")
    if size > max_size:
        mb = max_size // (1024 * 1024)
        raise ValueError(f"File too large. Maximum size is {mb} MB.")


def validate_page_limit(page_count: int, max_pages: int = MAX_PAGES) -> None:
    if page_count < 1:
        raise ValueError("PDF has no pages.")
    if page_count > max_pages:
        raise ValueError("PDF exceeds maximum page limit")
