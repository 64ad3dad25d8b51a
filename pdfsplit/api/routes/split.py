"""Split a PDF by page ranges, into fixed-size chunks, or by removing pages."""
import logging
from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from pdfsplit.api.routes.common import (
    artifact_response,
    count_pages,
    read_pdf_upload,
    upload_filename,
)
from pdfsplit.core.errors import ExtractionFailed, PackagingFailed
from pdfsplit.core.orchestrator import process
from pdfsplit.extractors.pypdf_extractor import PypdfExtractor
from pdfsplit.models.split import SplitParams

logger = logging.getLogger(__name__)

router = APIRouter()
extractor = PypdfExtractor()


@router.post("/process/split")
async def split_pdf(
    file: UploadFile = File(...),
    split_mode: str = Form(..., description="One of: ranges, fixed_range, remove_pages"),
    ranges: Optional[str] = Form(None, description="For ranges mode, e.g. 1,3,5-8"),
    remove_page: Optional[str] = Form(None, description="For remove_pages mode, e.g. 2,4-5"),
    fixed_range: Optional[int] = Form(None, description="For fixed_range mode: pages per file"),
):
    try:
        document = await read_pdf_upload(file)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    filename = upload_filename(file.filename)
    params = SplitParams(ranges_expr=ranges, remove_expr=remove_page, window_size=fixed_range)
    try:
        total_pages = count_pages(extractor, document)
        artifact = await run_in_threadpool(
            process, document, filename, total_pages, split_mode, params, extractor
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (ExtractionFailed, PackagingFailed):
        logger.exception("Split failed for %s", filename)
        raise HTTPException(status_code=500, detail="Failed to split PDF")
    finally:
        document.close()

    return artifact_response(artifact)
