"""Shared helpers for PDF routes: upload validation and file responses."""
import io
import os
from urllib.parse import quote

from fastapi import HTTPException, UploadFile
from fastapi.responses import Response

from pdfsplit.core.errors import ExtractionFailed
from pdfsplit.extractors.base import PageExtractor
from pdfsplit.models.split import OutputArtifact
from pdfsplit.security.validators import (
    validate_file_size,
    validate_page_limit,
    validate_upload,
)

DEFAULT_DOCUMENT_NAME = "document.pdf"


def upload_filename(name: str | None) -> str:
    """Bare file name of an upload, dropping any client-side directories."""
    if not name or not name.strip():
        return DEFAULT_DOCUMENT_NAME
    base = os.path.basename(name.strip().replace("\\", "/"))
    return base or DEFAULT_DOCUMENT_NAME


async def read_pdf_upload(file: UploadFile) -> io.BytesIO:
    """
    Validate the upload (type + size) and return its bytes as a rewindable stream.
    Raises ValueError on bad input.
    """
    validate_upload(file)
    data = await file.read()
    validate_file_size(len(data))
    return io.BytesIO(data)


def count_pages(extractor: PageExtractor, document: io.BytesIO, *, enforce_limit: bool = True) -> int:
    """Page count of the upload, optionally checked against the service page limit."""
    try:
        n = extractor.page_count(document)
    except ExtractionFailed as e:
        raise HTTPException(status_code=422, detail=str(e))
    if enforce_limit:
        try:
            validate_page_limit(n)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    document.seek(0)
    return n


def artifact_response(artifact: OutputArtifact) -> Response:
    content_disp = f'attachment; filename="{quote(artifact.name)}"'
    return Response(
        content=artifact.content,
        media_type=artifact.media_type,
        headers={"Content-Disposition": content_disp},
    )
