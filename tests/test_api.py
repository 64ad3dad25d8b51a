import io
import zipfile
from functools import partial

import pytest
from fastapi.testclient import TestClient

from conftest import make_pdf, page_ids
from pdfsplit.api.routes import common, split
from pdfsplit.main import app
from pdfsplit.security.validators import validate_page_limit


@pytest.fixture
def client():
    return TestClient(app)


def _post_split(client, pdf_bytes, filename="doc.pdf", **form):
    return client.post(
        "/process/split",
        files={"file": (filename, pdf_bytes, "application/pdf")},
        data=form,
    )


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_page_count(client, ten_page_pdf):
    resp = client.post(
        "/process/page-count",
        files={"file": ("doc.pdf", ten_page_pdf, "application/pdf")},
    )
    assert resp.status_code == 200
    assert resp.json() == {"filename": "doc.pdf", "page_count": 10}


def test_split_ranges_returns_pdf(client, ten_page_pdf):
    resp = _post_split(client, ten_page_pdf, split_mode="ranges", ranges="3,1-2")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert 'filename="split_doc.pdf"' in resp.headers["content-disposition"]
    assert page_ids(resp.content) == [3, 1, 2]


def test_split_fixed_range_returns_zip(client, ten_page_pdf):
    resp = _post_split(client, ten_page_pdf, split_mode="fixed_range", fixed_range="4")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/zip"
    assert 'filename="split_doc.pdf.zip"' in resp.headers["content-disposition"]
    with zipfile.ZipFile(io.BytesIO(resp.content)) as zf:
        assert zf.namelist() == ["split_part_1.pdf", "split_part_2.pdf", "split_part_3.pdf"]
        assert page_ids(zf.read("split_part_3.pdf")) == [9, 10]


def test_split_remove_pages(client, ten_page_pdf):
    resp = _post_split(client, ten_page_pdf, split_mode="remove_pages", remove_page="1-8")
    assert resp.status_code == 200
    assert page_ids(resp.content) == [9, 10]


@pytest.mark.parametrize(
    "form",
    [
        {"split_mode": "ranges", "ranges": "1-12"},
        {"split_mode": "ranges"},
        {"split_mode": "ranges", "ranges": "4-1"},
        {"split_mode": "remove_pages", "remove_page": "1-10"},
        {"split_mode": "fixed_range", "fixed_range": "0"},
        {"split_mode": "everything"},
    ],
)
def test_split_bad_requests(client, ten_page_pdf, form):
    resp = _post_split(client, ten_page_pdf, **form)
    assert resp.status_code == 400
    assert resp.json()["detail"]


def test_split_rejects_non_pdf_upload(client):
    resp = client.post(
        "/process/split",
        files={"file": ("notes.txt", b"hello", "text/plain")},
        data={"split_mode": "ranges", "ranges": "1"},
    )
    assert resp.status_code == 400


def test_split_unreadable_pdf(client):
    resp = _post_split(client, b"not really a pdf", split_mode="ranges", ranges="1")
    assert resp.status_code == 422


def test_split_page_limit(client, monkeypatch):
    monkeypatch.setattr(common, "validate_page_limit", partial(validate_page_limit, max_pages=3))
    resp = _post_split(client, make_pdf(4), split_mode="ranges", ranges="1")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "PDF exceeds maximum page limit"


def test_split_extraction_failure_is_500(client, ten_page_pdf, monkeypatch):
    def boom(document, page_numbers):
        raise RuntimeError("engine down")

    monkeypatch.setattr(split.extractor, "extract_pages", boom)
    resp = _post_split(client, ten_page_pdf, split_mode="fixed_range", fixed_range="3")
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to split PDF"

@pytest.mark.parametrize(
    "name, expected",
    [
        ("doc.pdf", "doc.pdf"),
        ("scans/doc.pdf", "doc.pdf"),
        ("C:\\scans\\doc.pdf", "doc.pdf"),
        (" doc.pdf ", "doc.pdf"),
        ("", "document.pdf"),
        (None, "document.pdf"),
        ("scans/", "document.pdf"),
    ],
)
def test_upload_filename(name, expected):
    assert common.upload_filename(name) == expected


def test_split_closes_upload_when_page_count_fails(client, monkeypatch):
    opened = []

    async def fake_read(file):
        stream = io.BytesIO(b"not really a pdf")
        opened.append(stream)
        return stream

    monkeypatch.setattr(split, "read_pdf_upload", fake_read)
    resp = _post_split(client, b"not really a pdf", split_mode="ranges", ranges="1")
    assert resp.status_code == 422
    assert opened and opened[0].closed
