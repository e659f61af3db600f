"""SelectionStore: the selection facts of a browsing session.

Holds explicit per-record selects, the active "first N rows" bulk rule
and its per-record overrides. Immutable: every transition returns a new
SelectionStore, so event handlers take the current store and hand back
the next one.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import AbstractSet, Sequence

from .records import Artwork, iter_global_indices


@dataclass(frozen=True)
class SelectionStore:
    """Selection state that persists across page navigation.

    explicit_selected
        Ids the user selected one by one (or that a bulk rule selected
        on the page visible when it was applied).
    bulk_threshold
        Every record whose global row index is <= this value is selected
        unless overridden. 0 means no bulk rule.
    bulk_override_excluded
        Ids inside the bulk range that the user unchecked.
    bulk_range_membership
        Ids seen on rendered pages whose global row index is inside the
        bulk range. Grows only; recomputable by replaying observe_page.
    """

    explicit_selected: frozenset[int] = field(default_factory=frozenset)
    bulk_threshold: int = 0
    bulk_override_excluded: frozenset[int] = field(default_factory=frozenset)
    bulk_range_membership: frozenset[int] = field(default_factory=frozenset)

    def in_bulk_range(self, global_index: int) -> bool:
        return self.bulk_threshold > 0 and global_index <= self.bulk_threshold

    def is_selected(self, record_id: int, global_index: int) -> bool:
        """Selection predicate for one record at a known global row index."""
        if record_id in self.explicit_selected:
            return True
        return (
            self.in_bulk_range(global_index)
            and record_id not in self.bulk_override_excluded
        )

    def observe_page(
        self,
        records: Sequence[Artwork],
        page_number: int,
        page_size: int,
    ) -> SelectionStore:
        """Record which ids of a newly rendered page fall in the bulk range."""
        if self.bulk_threshold <= 0:
            return self
        seen = {
            record.id
            for record, idx in iter_global_indices(records, page_number, page_size)
            if idx <= self.bulk_threshold
        }
        if seen <= self.bulk_range_membership:
            return self
        return replace(
            self, bulk_range_membership=self.bulk_range_membership | seen,
        )

    def toggle_on_current_page(
        self,
        new_selected_ids_on_page: AbstractSet[int],
        page_records: Sequence[Artwork],
        page_number: int,
        page_size: int,
    ) -> SelectionStore:
        """Reconcile the visible page's checkbox state with the store.

        ``new_selected_ids_on_page`` is the complete set of checked ids on
        the page after the user's interaction, not a diff.
        """
        explicit = set(self.explicit_selected)
        excluded = set(self.bulk_override_excluded)

        for record, idx in iter_global_indices(page_records, page_number, page_size):
            if record.id in new_selected_ids_on_page:
                explicit.add(record.id)
                excluded.discard(record.id)
            else:
                explicit.discard(record.id)
                if self.in_bulk_range(idx):
                    excluded.add(record.id)

        return replace(
            self,
            explicit_selected=frozenset(explicit),
            bulk_override_excluded=frozenset(excluded),
        )

    def apply_bulk_select(
        self,
        count: int,
        visible_page_records: Sequence[Artwork],
        page_number: int,
        page_size: int,
    ) -> SelectionStore:
        """Select the first ``count`` rows across all pages.

        Overrides and observed membership from any previous bulk rule are
        dropped. Only the visible page is materialized here; other pages
        pick up the rule through bulk_threshold when they are observed.
        ``count`` must already be validated (see validate_bulk_count).
        """
        in_range = {
            record.id
            for record, idx in iter_global_indices(
                visible_page_records, page_number, page_size,
            )
            if idx <= count
        }
        return SelectionStore(
            explicit_selected=self.explicit_selected | in_range,
            bulk_threshold=count,
            bulk_override_excluded=frozenset(),
            bulk_range_membership=frozenset(in_range),
        )

    def clear_all(self) -> SelectionStore:
        return SelectionStore()

    def total_selected_count(self) -> int:
        """Number of selected records across all pages."""
        from .projector import total_selected_count

        return total_selected_count(self)

    def __repr__(self) -> str:
        return (
            f"SelectionStore(explicit={len(self.explicit_selected)}, "
            f"threshold={self.bulk_threshold}, "
            f"excluded={len(self.bulk_override_excluded)}, "
            f"observed={len(self.bulk_range_membership)})"
        )
