"""Artwork records, fetched pages and global row index arithmetic.

A record's global row index is the 1-based position it would occupy if
every page were concatenated in fetch order. It depends on the page size
and is always recomputed from (page_number, page_size, position), never
stored on the record.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

import numpy as np
import pandas as pd

_TEXT_FIELDS = ("title", "place_of_origin", "artist_display", "inscriptions")
_YEAR_FIELDS = ("date_start", "date_end")

TABLE_COLUMNS = _TEXT_FIELDS + _YEAR_FIELDS


@dataclass(frozen=True)
class Artwork:
    """A single row of the remote collection."""

    id: int
    title: str | None = None
    place_of_origin: str | None = None
    artist_display: str | None = None
    inscriptions: str | None = None
    date_start: int | None = None
    date_end: int | None = None

    @classmethod
    def from_dict(cls, item: Mapping[str, Any]) -> Artwork:
        """Build an Artwork from one item of the API ``data`` array.

        Raises TypeError/ValueError when the item does not match the
        expected shape.
        """
        if not isinstance(item, Mapping):
            raise TypeError(
                f"Artwork payload must be an object, got {type(item).__name__}."
            )
        record_id = item.get("id")
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            raise TypeError(f"Artwork id must be an integer, got {record_id!r}.")
        if record_id < 1:
            raise ValueError(f"Artwork id must be positive, got {record_id}.")

        fields: dict[str, Any] = {}
        for name in _TEXT_FIELDS:
            value = item.get(name)
            if value is not None and not isinstance(value, str):
                raise TypeError(
                    f"Artwork {record_id}: {name} must be a string or null, "
                    f"got {value!r}."
                )
            fields[name] = value
        for name in _YEAR_FIELDS:
            value = item.get(name)
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, int)
            ):
                raise TypeError(
                    f"Artwork {record_id}: {name} must be an integer or null, "
                    f"got {value!r}."
                )
            fields[name] = value

        return cls(id=record_id, **fields)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "place_of_origin": self.place_of_origin,
            "artist_display": self.artist_display,
            "inscriptions": self.inscriptions,
            "date_start": self.date_start,
            "date_end": self.date_end,
        }


@dataclass(frozen=True)
class Page:
    """One fetched page of records plus the collection totals."""

    records: tuple[Artwork, ...]
    page_number: int
    page_size: int
    total_count: int
    total_pages: int

    @classmethod
    def build(
        cls,
        records: Iterable[Artwork],
        page_number: int,
        page_size: int,
        total_count: int,
        total_pages: int | None = None,
    ) -> Page:
        """Create a Page, deriving total_pages when the source omits it."""
        if total_pages is None:
            total_pages = math.ceil(total_count / page_size) if total_count else 0
        return cls(
            records=tuple(records),
            page_number=page_number,
            page_size=page_size,
            total_count=total_count,
            total_pages=max(1, total_pages),
        )

    def __len__(self) -> int:
        return len(self.records)


def global_index(page_number: int, page_size: int, position: int) -> int:
    """Return the 1-based global row index of a 0-based page position."""
    return (page_number - 1) * page_size + position + 1


def global_indices(page_number: int, page_size: int, n_records: int) -> np.ndarray:
    """Global row indices for the first ``n_records`` positions of a page."""
    start = (page_number - 1) * page_size + 1
    return np.arange(start, start + n_records, dtype=np.int64)


def iter_global_indices(
    records: Sequence[Artwork], page_number: int, page_size: int,
) -> Iterable[tuple[Artwork, int]]:
    """Yield (record, global_index) pairs for a page in display order."""
    indices = global_indices(page_number, page_size, len(records))
    for record, idx in zip(records, indices.tolist()):
        yield record, idx


def page_to_frame(records: Sequence[Artwork]) -> pd.DataFrame:
    """Tabular view of a page, indexed by record id in display order."""
    frame = pd.DataFrame(
        [r.to_dict() for r in records],
        columns=["id", *TABLE_COLUMNS],
    )
    frame = frame.set_index("id")
    for name in _YEAR_FIELDS:
        frame[name] = frame[name].astype("Int64")
    return frame
