"""
Run a split request: turn the mode and its parameters into page lists, extract
each list from the document, and return one PDF or a zip of PDFs.
"""
import io
import logging
from typing import BinaryIO, List, Optional, Union

from pdfsplit.core.errors import (
    ExtractionFailed,
    InvalidWindowSize,
    NothingToKeep,
    RangeExceedsPageCount,
    UnknownSplitMode,
)
from pdfsplit.core.packager import pack
from pdfsplit.core.ranges import complement, parse, partition
from pdfsplit.extractors.base import PageExtractor
from pdfsplit.extractors.pypdf_extractor import PypdfExtractor
from pdfsplit.models.split import OutputArtifact, SplitMode, SplitParams
from pdfsplit.utils.output_names import artifact_name

logger = logging.getLogger(__name__)


def _split_mode(mode: Union[SplitMode, str]) -> SplitMode:
    try:
        return SplitMode(mode)
    except ValueError:
        raise UnknownSplitMode(f"Invalid split mode: {mode!r}") from None


def _check_max_page(pages: List[int], total_pages: int) -> None:
    # Only the highest page is checked; duplicates and order are left as given.
    if max(pages) > total_pages:
        raise RangeExceedsPageCount(
            f"Ranges exceed page count: page {max(pages)} requested, PDF has {total_pages} page(s)"
        )


def _selections(mode: SplitMode, params: SplitParams, total_pages: int) -> List[List[int]]:
    if mode == SplitMode.RANGES:
        pages = parse(params.ranges_expr)
        _check_max_page(pages, total_pages)
        return [pages]

    if mode == SplitMode.REMOVE_PAGES:
        remove = parse(params.remove_expr)
        _check_max_page(remove, total_pages)
        keep = complement(remove, total_pages)
        if not keep:
            raise NothingToKeep("Removing these pages would leave an empty document")
        return [keep]

    if mode == SplitMode.FIXED_RANGE:
        if params.window_size is None or params.window_size <= 0:
            raise InvalidWindowSize("Fixed range must be greater than 0")
        return partition(total_pages, params.window_size)

    raise UnknownSplitMode(f"Invalid split mode: {mode}")


def _extract(extractor: PageExtractor, document: BinaryIO, pages: List[int]) -> bytes:
    # Every extraction consumes the stream, so always start from the beginning.
    document.seek(0, io.SEEK_SET)
    logger.debug("Extracting pages %s", pages)
    try:
        return extractor.extract_pages(document, pages)
    except ExtractionFailed:
        logger.error("Extraction failed for pages %s", pages)
        raise
    except Exception as e:
        logger.error("Extraction failed for pages %s: %s", pages, e)
        raise ExtractionFailed(f"Failed to split pdf for range {pages}: {e}", pages=pages) from e


def run(
    document: BinaryIO,
    original_name: str,
    total_pages: int,
    mode: Union[SplitMode, str],
    params: SplitParams,
    extractor: PageExtractor,
) -> OutputArtifact:
    mode = _split_mode(mode)
    selections = _selections(mode, params, total_pages)
    logger.info(
        "Splitting %s (%d page(s)) in %s mode into %d output(s)",
        original_name, total_pages, mode.value, len(selections),
    )

    # All outputs are built before packaging, so a failure never leaves a partial archive.
    outputs = [_extract(extractor, document, pages) for pages in selections]

    if len(outputs) == 1:
        return OutputArtifact(name=artifact_name(original_name, archived=False), content=outputs[0])
    return OutputArtifact(name=artifact_name(original_name, archived=True), content=pack(outputs))


def process(
    document: BinaryIO,
    original_name: str,
    total_pages: int,
    mode: Union[SplitMode, str],
    params: Union[SplitParams, dict, None] = None,
    extractor: Optional[PageExtractor] = None,
) -> OutputArtifact:
    """
    Split ``document`` according to ``mode``.

    ``mode`` is one of ``ranges``, ``fixed_range`` or ``remove_pages``; ``params``
    only needs the field for that mode (``ranges_expr``, ``window_size`` or
    ``remove_expr``). Raises a ``SplitValidationError`` subclass for bad input,
    ``ExtractionFailed`` or ``PackagingFailed`` when building the output fails.
    The caller keeps ownership of ``document``.
    """
    if params is None:
        params = SplitParams()
    elif isinstance(params, dict):
        params = SplitParams(**params)

    if extractor is None:
        extractor = PypdfExtractor()

    return run(document, original_name, total_pages, mode, params, extractor)
