"""Selection projection: per-page checkbox state and the global count."""

from __future__ import annotations

from typing import Sequence

from .records import Artwork, iter_global_indices
from .selection_store import SelectionStore


def current_page_selection(
    store: SelectionStore,
    page_records: Sequence[Artwork],
    page_number: int,
    page_size: int,
) -> set[int]:
    """Return the ids on the page whose checkbox should be checked.

    Pure: the caller observes the page separately when it loads.
    """
    return {
        record.id
        for record, idx in iter_global_indices(page_records, page_number, page_size)
        if store.is_selected(record.id, idx)
    }


def total_selected_count(store: SelectionStore) -> int:
    """Count selected records across all pages without fetching them.

    Every global row index up to the bulk threshold counts unless its id
    was overridden. Explicit selections add to that, except ids already
    counted through observed bulk range membership. Overrides can only
    exist for observed ids, so the result is exact.
    """
    outside_bulk = store.explicit_selected - store.bulk_range_membership
    return (
        store.bulk_threshold
        - len(store.bulk_override_excluded)
        + len(outside_bulk)
    )


def selection_summary(count: int) -> str:
    """Text for the selection bar, e.g. "1 row selected"."""
    noun = "row" if count == 1 else "rows"
    return f"{count} {noun} selected"
