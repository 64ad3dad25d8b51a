import io

import pytest
from pypdf import PdfReader, PdfWriter

from pdfsplit.extractors.base import PageExtractor


def make_pdf(n_pages: int) -> bytes:
    """Blank PDF whose page i (1-based) is 100 + i points wide."""
    writer = PdfWriter()
    for i in range(1, n_pages + 1):
        writer.add_blank_page(width=100 + i, height=200)
    out = io.BytesIO()
    writer.write(out)
    return out.getvalue()


def page_ids(pdf_bytes: bytes) -> list[int]:
    """Recover the original page numbers of a PDF built from make_pdf."""
    reader = PdfReader(io.BytesIO(pdf_bytes))
    return [round(float(page.mediabox.width)) - 100 for page in reader.pages]


class RecordingExtractor(PageExtractor):
    """Returns a fake PDF per call and records what it was asked for."""

    def __init__(self, total_pages: int = 10, fail_on_call: int | None = None):
        self.total_pages = total_pages
        self.fail_on_call = fail_on_call
        self.calls = []

    def extract_pages(self, document, page_numbers):
        self.calls.append((document.tell(), list(page_numbers)))
        document.read()
        if self.fail_on_call is not None and len(self.calls) == self.fail_on_call:
            raise RuntimeError("engine exploded")
        return ("pages:" + ",".join(str(p) for p in page_numbers)).encode()

    def page_count(self, document):
        return self.total_pages


@pytest.fixture
def ten_page_pdf() -> bytes:
    return make_pdf(10)


@pytest.fixture
def document():
    return io.BytesIO(b"%PDF-1.7 fake document body")
