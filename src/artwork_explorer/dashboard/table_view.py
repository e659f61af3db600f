"""TableView: checkbox table and pagination controls for one page."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Sequence

import panel as pn

from ..core.errors import InvalidArgument
from ..core.records import TABLE_COLUMNS, Artwork, page_to_frame
from ..core.validation import validate_page_number
from ..display_utils import format_display_frame, page_info, prettify_name

SelectionToggledCallback = Callable[[set], Any]
PageRequestedCallback = Callable[[int], Any]

logger = logging.getLogger(__name__)

_COLUMN_WIDTHS = {
    "title": 250,
    "place_of_origin": 150,
    "artist_display": 200,
    "inscriptions": 200,
    "date_start": 100,
    "date_end": 100,
}


class TableView:
    """Renders a page of artworks with checkboxes.

    The view holds no selection state of its own. ``render`` takes the
    page and the ids to check; user interaction is reported through
    ``on_selection_toggled`` (complete checked-id set for the page) and
    ``on_page_requested`` (1-based page number).
    """

    def __init__(self) -> None:
        self._records: list[Artwork] = []
        self._current_page = 1
        self._total_pages = 1
        self._syncing = False  # Guard flag: suppresses table->callback events
        self._toggle_callbacks: list[SelectionToggledCallback] = []
        self._page_callbacks: list[PageRequestedCallback] = []
        self._build_widgets()

    def _build_widgets(self) -> None:
        self.table = pn.widgets.Tabulator(
            format_display_frame(page_to_frame([])),
            selectable="checkbox",
            show_index=False,
            disabled=True,
            titles={c: prettify_name(c) for c in TABLE_COLUMNS},
            widths=dict(_COLUMN_WIDTHS),
            text_align={"date_start": "right", "date_end": "right"},
            theme="simple",
            sizing_mode="stretch_width",
        )
        self.table.param.watch(self._on_table_selection, "selection")

        self.page_info_text = pn.pane.Markdown(
            page_info(1, 1), margin=(5, 10),
        )
        self.prev_button = pn.widgets.Button(
            name="‹ Previous", button_type="default", width=110, disabled=True,
        )
        self.next_button = pn.widgets.Button(
            name="Next ›", button_type="default", width=110, disabled=True,
        )
        self.prev_button.on_click(self._on_previous_click)
        self.next_button.on_click(self._on_next_click)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(
        self,
        records: Sequence[Artwork],
        checked_ids: set[int],
        current_page: int,
        total_pages: int,
        loading: bool = False,
    ) -> None:
        """Show a page and check exactly the rows in ``checked_ids``."""
        self._records = list(records)
        self._current_page = current_page
        self._total_pages = total_pages

        frame = format_display_frame(page_to_frame(self._records))
        selection = [
            i for i, r in enumerate(self._records) if r.id in checked_ids
        ]

        self._syncing = True
        try:
            if not self.table.value.index.equals(frame.index):
                self.table.value = frame
            if list(self.table.selection) != selection:
                self.table.selection = selection
        finally:
            self._syncing = False

        self.page_info_text.object = page_info(current_page, total_pages)
        self.set_loading(loading)

    def set_loading(self, loading: bool) -> None:
        self.table.loading = loading
        self.prev_button.disabled = loading or self._current_page <= 1
        self.next_button.disabled = loading or self._current_page >= self._total_pages

    @property
    def checked_ids(self) -> set[int]:
        """Ids currently checked in the table."""
        return {
            self._records[i].id
            for i in self.table.selection
            if 0 <= i < len(self._records)
        }

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on_selection_toggled(self, callback: SelectionToggledCallback) -> None:
        """Register a callback: fn(new_selected_ids_on_page)."""
        self._toggle_callbacks.append(callback)

    def on_page_requested(self, callback: PageRequestedCallback) -> None:
        """Register a callback: fn(page_number)."""
        self._page_callbacks.append(callback)

    def _on_table_selection(self, event) -> None:
        if self._syncing:
            return
        ids = self.checked_ids
        for cb in self._toggle_callbacks:
            cb(ids)

    async def _on_previous_click(self, event) -> None:
        await self.request_page(self._current_page - 1)

    async def _on_next_click(self, event) -> None:
        await self.request_page(self._current_page + 1)

    async def request_page(self, page_number: int) -> None:
        """Emit a page request if ``page_number`` is within range."""
        try:
            page_number = validate_page_number(page_number, self._total_pages)
        except InvalidArgument as e:
            logger.debug("Page request ignored: %s", e)
            return
        for cb in self._page_callbacks:
            result = cb(page_number)
            if inspect.isawaitable(result):
                await result

    def build_panel(self) -> pn.Column:
        pager = pn.Row(
            self.page_info_text,
            pn.layout.HSpacer(),
            self.prev_button,
            self.next_button,
            sizing_mode="stretch_width",
        )
        return pn.Column(self.table, pager, sizing_mode="stretch_width")

