"""Errors raised while selecting, extracting and packaging pages."""
from typing import List, Optional


class SplitError(Exception):
    """Base class for every error raised by a split call."""


class SplitValidationError(SplitError, ValueError):
    """Bad input detected before any page is extracted."""


class EmptyExpression(SplitValidationError):
    pass


class InvalidRangeFormat(SplitValidationError):
    pass


class InvalidNumber(SplitValidationError):
    pass


class DescendingRange(SplitValidationError):
    pass


class RangeExceedsPageCount(SplitValidationError):
    pass


class NothingToKeep(SplitValidationError):
    pass


class InvalidWindowSize(SplitValidationError):
    pass


class UnknownSplitMode(SplitValidationError):
    pass


class ExtractionFailed(SplitError):
    """The page extractor could not build a PDF for a page list."""

    def __init__(self, message: str, pages: Optional[List[int]] = None):
        super().__init__(message)
        self.pages = list(pages) if pages is not None else None


class PackagingFailed(SplitError):
    """A zip entry could not be created or written."""

    def __init__(self, message: str, entry_name: Optional[str] = None):
        super().__init__(message)
        self.entry_name = entry_name
