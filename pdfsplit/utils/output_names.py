"""Generate artifact names, zip entry names and media types for split results."""
import os

ARTIFACT_PREFIX = "split_"
ZIP_EXTENSION = ".zip"

MEDIA_TYPES = {
    ".pdf": "application/pdf",
    ".zip": "application/zip",
}


def artifact_name(original_name: str, archived: bool) -> str:
    """``split_<name>`` for a single PDF, ``split_<name>.zip`` for an archive."""
    name = ARTIFACT_PREFIX + original_name
    if archived:
        name += ZIP_EXTENSION
    return name


def archive_entry_name(index: int) -> str:
    """Entry name for the 0-based output ``index``; names are 1-based."""
    return f"split_part_{index + 1}.pdf"


def media_type_for(filename: str) -> str:
    ext = os.path.splitext(filename)[1].lower()
    return MEDIA_TYPES.get(ext, "application/octet-stream")
