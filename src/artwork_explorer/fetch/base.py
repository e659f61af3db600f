"""PageFetcher: base class for remote page sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..core.records import Page


class PageFetcher(ABC):
    """Delivers one fixed-size page of records at a time.

    Implementations raise FetchError for any failure; callers treat a
    failure as fatal to that request only.
    """

    @abstractmethod
    async def fetch(self, page_number: int, page_size: int) -> Page:
        """Return page ``page_number`` (1-based) of ``page_size`` records."""
        ...

    async def aclose(self) -> None:
        """Release any resources held by the fetcher."""
