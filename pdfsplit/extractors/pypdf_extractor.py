"""Page extraction backed by pypdf."""
import io
from typing import BinaryIO, Sequence

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PyPdfError

from pdfsplit.core.errors import ExtractionFailed
from pdfsplit.extractors.base import PageExtractor


class PypdfExtractor(PageExtractor):
    def extract_pages(self, document: BinaryIO, page_numbers: Sequence[int]) -> bytes:
        pages = list(page_numbers)
        try:
            reader = PdfReader(document)
            n = len(reader.pages)
            bad = [p for p in pages if p < 1 or p > n]
            if bad:
                raise ExtractionFailed(
                    f"Page number(s) {bad} do not exist. PDF has {n} page(s) (valid: 1–{n}).",
                    pages=pages,
                )
            writer = PdfWriter()
            for i in pages:
                writer.add_page(reader.pages[i - 1])
            out = io.BytesIO()
            writer.write(out)
        except (PyPdfError, OSError) as e:
            raise ExtractionFailed(f"Could not extract pages {pages}: {e}", pages=pages) from e
        return out.getvalue()

    def page_count(self, document: BinaryIO) -> int:
        try:
            return len(PdfReader(document).pages)
        except (PyPdfError, OSError) as e:
            raise ExtractionFailed(f"Could not read PDF: {e}") from e
