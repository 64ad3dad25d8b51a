"""Bundle several split PDFs into one zip archive."""
import io
import logging
import zipfile
from typing import Sequence

from pdfsplit.core.errors import PackagingFailed
from pdfsplit.utils.output_names import archive_entry_name

logger = logging.getLogger(__name__)

# Fixed entry timestamp so identical input gives identical archive bytes
ZIP_ENTRY_DATE = (1980, 1, 1, 0, 0, 0)


def pack(outputs: Sequence[bytes]) -> bytes:
    """
    Write each output as ``split_part_<n>.pdf`` (n starting at 1) in input order
    and return the archive bytes. Nothing is returned if any entry fails.
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zipf:
        for i, content in enumerate(outputs):
            entry_name = archive_entry_name(i)
            info = zipfile.ZipInfo(entry_name, date_time=ZIP_ENTRY_DATE)
            info.compress_type = zipfile.ZIP_DEFLATED
            try:
                zipf.writestr(info, content)
            except (OSError, TypeError, ValueError, zipfile.LargeZipFile) as e:
                raise PackagingFailed(
                    f"Failed to write {entry_name} to zip: {e}", entry_name=entry_name
                ) from e
    logger.debug("Packed %d entries into %d byte archive", len(outputs), buffer.tell())
    return buffer.getvalue()
