"""Report how many pages an uploaded PDF has (sync - returns JSON)."""
from fastapi import APIRouter, File, HTTPException, UploadFile

from pdfsplit.api.routes.common import count_pages, read_pdf_upload
from pdfsplit.extractors.pypdf_extractor import PypdfExtractor

router = APIRouter()
extractor = PypdfExtractor()


@router.post("/process/page-count")
async def page_count(file: UploadFile = File(...)):
    try:
        document = await read_pdf_upload(file)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    try:
        return {"filename": file.filename, "page_count": count_pages(extractor, document, enforce_limit=False)}
    finally:
        document.close()
