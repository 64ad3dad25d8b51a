"""Turn page-range text, remove-lists and window sizes into ordered page lists."""
import re
from typing import List

from pdfsplit.core.errors import (
    DescendingRange,
    EmptyExpression,
    InvalidNumber,
    InvalidRangeFormat,
    InvalidWindowSize,
)

# ASCII digits with an optional sign; no underscores or other Unicode digits
_NUMBER = re.compile(r"[+-]?[0-9]+")


def _to_page(text: str, token: str) -> int:
    text = text.strip()
    if not _NUMBER.fullmatch(text):
        raise InvalidNumber(f"Invalid number '{text}' in '{token}'")
    n = int(text)
    if n < 1:
        raise InvalidNumber(f"Page numbers start at 1, got {n} in '{token}'")
    return n


def parse(expr: str) -> List[int]:
    """
    Parse a comma-separated range expression such as ``"1,3,5-8"``.

    Tokens keep the order they were written in; a ``start-end`` span expands
    to every page from start to end inclusive. Duplicates are kept.
    """
    if expr is None or not expr.strip():
        raise EmptyExpression("Page range expression is empty")

    pages: List[int] = []
    for token in expr.split(","):
        token = token.strip()
        if "-" in token:
            parts = token.split("-")
            if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
                raise InvalidRangeFormat(f"Invalid range format: '{token}'")
            start = _to_page(parts[0], token)
            end = _to_page(parts[1], token)
            if start > end:
                raise DescendingRange(
                    f"Invalid range {start}-{end}: start must be <= end"
                )
            pages.extend(range(start, end + 1))
        else:
            pages.append(_to_page(token, token))
    return pages


def complement(remove: List[int], total_pages: int) -> List[int]:
    """Pages in 1..total_pages that are not in ``remove``, ascending."""
    removed = set(remove)
    return [p for p in range(1, total_pages + 1) if p not in removed]


def partition(total_pages: int, window_size: int) -> List[List[int]]:
    """Split 1..total_pages into consecutive windows of ``window_size`` pages."""
    if window_size is None or window_size < 1:
        raise InvalidWindowSize(f"Fixed range must be greater than 0, got {window_size}")
    if total_pages < 1:
        raise InvalidWindowSize(f"Document has no pages to partition ({total_pages})")
    windows = []
    for start in range(1, total_pages + 1, window_size):
        end = min(start + window_size - 1, total_pages)
        windows.append(list(range(start, end + 1)))
    return windows
