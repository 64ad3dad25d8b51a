from abc import ABC, abstractmethod
from typing import BinaryIO, Sequence


class PageExtractor(ABC):
    @abstractmethod
    def extract_pages(self, document: BinaryIO, page_numbers: Sequence[int]) -> bytes:
        """Return a new PDF holding ``page_numbers`` (1-based) in the given order."""
        pass

    @abstractmethod
    def page_count(self, document: BinaryIO) -> int:
        pass
