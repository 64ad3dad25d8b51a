from enum import Enum
from pydantic import BaseModel
from typing import Optional

from pdfsplit.utils.output_names import ZIP_EXTENSION, media_type_for


class SplitMode(str, Enum):
    RANGES = "ranges"
    FIXED_RANGE = "fixed_range"
    REMOVE_PAGES = "remove_pages"


class SplitParams(BaseModel):
    ranges_expr: Optional[str] = None  # used by SplitMode.RANGES
    remove_expr: Optional[str] = None  # used by SplitMode.REMOVE_PAGES
    window_size: Optional[int] = None  # used by SplitMode.FIXED_RANGE


class OutputArtifact(BaseModel):
    name: str
    content: bytes

    @property
    def is_archive(self) -> bool:
        return self.name.lower().endswith(ZIP_EXTENSION)

    @property
    def media_type(self) -> str:
        return media_type_for(self.name)
