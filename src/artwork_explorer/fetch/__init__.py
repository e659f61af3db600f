"""Page sources for the explorer."""

from .base import PageFetcher
from .artic import ArticPageFetcher, parse_page_payload
from .memory import InMemoryPageFetcher

__all__ = [
    "PageFetcher",
    "ArticPageFetcher",
    "InMemoryPageFetcher",
    "parse_page_payload",
]
