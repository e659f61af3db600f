"""InMemoryPageFetcher: serves pages from a local DataFrame."""

from __future__ import annotations

import asyncio

import pandas as pd

from ..core.errors import FetchError
from ..core.records import Artwork, Page
from ..core.validation import validate_page_number, validate_page_size
from .base import PageFetcher


class InMemoryPageFetcher(PageFetcher):
    """Pages over a DataFrame of artworks, in row order.

    The frame needs an ``id`` column (or an index named ``id``) and a
    ``title`` column; other artwork columns are optional. Useful for
    offline demos and tests. ``calls`` records every requested page.
    """

    def __init__(self, frame: pd.DataFrame, delay: float = 0.0) -> None:
        if frame.index.name == "id":
            frame = frame.reset_index()
        if "id" not in frame.columns or "title" not in frame.columns:
            raise ValueError(
                "Artwork frame needs 'id' and 'title' columns. "
                f"Got: {list(frame.columns)}"
            )
        if frame["id"].duplicated().any():
            raise ValueError("Artwork ids must be unique.")
        self._frame = frame.reset_index(drop=True)
        self._delay = delay
        self.calls: list[tuple[int, int]] = []
        self.fail_next = False

    @classmethod
    def from_records(cls, records: list[Artwork], delay: float = 0.0) -> InMemoryPageFetcher:
        frame = pd.DataFrame([r.to_dict() for r in records])
        return cls(frame, delay=delay)

    @property
    def total_count(self) -> int:
        return len(self._frame)

    async def fetch(self, page_number: int, page_size: int) -> Page:
        page_number = validate_page_number(page_number)
        page_size = validate_page_size(page_size)
        self.calls.append((page_number, page_size))
        if self._delay:
            await asyncio.sleep(self._delay)
        if self.fail_next:
            self.fail_next = False
            raise FetchError("Simulated fetch failure.", page_number)

        start = (page_number - 1) * page_size
        chunk = self._frame.iloc[start:start + page_size]
        records = [
            Artwork.from_dict(_clean_row(row))
            for row in chunk.to_dict(orient="records")
        ]
        return Page.build(
            records,
            page_number=page_number,
            page_size=page_size,
            total_count=self.total_count,
        )


def _clean_row(row: dict) -> dict:
    """Convert pandas NA/NaN and numpy scalars back to plain Python values."""
    cleaned = {}
    for key, value in row.items():
        if pd.isna(value):
            cleaned[key] = None
        else:
            if hasattr(value, "item"):
                value = value.item()
            # Integer columns holding NaN come back as floats
            if isinstance(value, float) and value.is_integer():
                value = int(value)
            cleaned[key] = value
    return cleaned
