"""BrowserState: reactive session state for the artwork browser."""

from __future__ import annotations

import logging

import param

from ..config import PAGE_SIZE
from ..core.errors import FetchError, StaleResponse
from ..core.projector import current_page_selection, total_selected_count
from ..core.records import Page
from ..core.selection_store import SelectionStore
from ..core.validation import validate_bulk_count, validate_page_number
from ..fetch.base import PageFetcher

logger = logging.getLogger(__name__)


class BrowserState(param.Parameterized):
    """Centralized state for one browsing session.

    Owns the currently displayed page and the SelectionStore. Page loads
    are asynchronous; everything else is a synchronous transition run
    from an event handler. The projected checkbox state and the global
    selected count are recomputed whenever the page or the store changes.
    """

    fetcher = param.ClassSelector(class_=PageFetcher, doc="Remote page source")
    page_size = param.Integer(default=PAGE_SIZE, bounds=(1, None), constant=True)

    # --- Displayed page ---
    current_page = param.Integer(default=1, bounds=(1, None))
    total_pages = param.Integer(default=1, bounds=(1, None))
    total_count = param.Integer(default=0, bounds=(0, None))
    records = param.List(default=[], doc="Artworks on the displayed page")

    # --- Selection ---
    store = param.ClassSelector(class_=SelectionStore, default=SelectionStore())
    checked_ids = param.List(default=[], doc="Ids to check on the displayed page")
    selected_count = param.Integer(default=0)

    # --- Status ---
    is_loading = param.Boolean(default=False)
    error_text = param.String(default="")
    status_text = param.String(default="")

    def __init__(self, **params):
        super().__init__(**params)
        self._requested_page: int = self.current_page

    @property
    def can_go_previous(self) -> bool:
        return not self.is_loading and self.current_page > 1

    @property
    def can_go_next(self) -> bool:
        return not self.is_loading and self.current_page < self.total_pages

    # ------------------------------------------------------------------
    # Page loading
    # ------------------------------------------------------------------

    async def load_page(self, page_number: int) -> None:
        """Fetch a page and display it unless a newer request superseded it.

        A FetchError leaves the displayed page and the store unchanged and
        sets error_text for the retry screen.
        """
        page_number = validate_page_number(page_number)
        self._requested_page = page_number
        self.param.update(is_loading=True, error_text="")

        try:
            page = await self.fetcher.fetch(page_number, self.page_size)
        except FetchError as e:
            if page_number != self._requested_page:
                logger.debug("Ignoring failure of superseded page %d", page_number)
                return
            logger.warning("Could not load page %d: %s", page_number, e)
            self.param.update(is_loading=False, error_text=str(e))
            return

        try:
            self._accept(page)
        except StaleResponse as e:
            logger.debug("%s", e)

    def _accept(self, page: Page) -> None:
        """Display a fetched page and observe it in the selection store."""
        if page.page_number != self._requested_page:
            raise StaleResponse(page.page_number, self._requested_page)

        records = list(page.records)
        self.param.update(
            records=records,
            current_page=page.page_number,
            total_count=page.total_count,
            total_pages=page.total_pages,
            store=self.store.observe_page(records, page.page_number, page.page_size),
            is_loading=False,
        )

    async def next_page(self) -> None:
        if self.can_go_next:
            await self.load_page(self.current_page + 1)

    async def previous_page(self) -> None:
        if self.can_go_previous:
            await self.load_page(self.current_page - 1)

    async def retry(self) -> None:
        """Re-issue the request that last failed."""
        await self.load_page(self._requested_page)

    # ------------------------------------------------------------------
    # Selection events
    # ------------------------------------------------------------------

    def toggle_selection(self, new_selected_ids_on_page: set[int]) -> None:
        """Apply the complete checked-id set reported by the table."""
        self.store = self.store.toggle_on_current_page(
            set(new_selected_ids_on_page),
            self.records,
            self.current_page,
            self.page_size,
        )

    def apply_bulk_select(self, count) -> int:
        """Select the first ``count`` rows across all pages.

        Raises InvalidArgument (store unchanged) for a missing, non-integer
        or non-positive count. Returns the validated count.
        """
        count = validate_bulk_count(count)
        self.store = self.store.apply_bulk_select(
            count, self.records, self.current_page, self.page_size,
        )
        self.status_text = (
            f"First {count} rows will be selected as you navigate pages"
        )
        logger.info("Bulk selection set to the first %d rows", count)
        return count

    def clear_selection(self) -> None:
        self.param.update(store=self.store.clear_all(), status_text="")

    @param.depends("store", "records", "current_page", watch=True, on_init=True)
    def _refresh_projection(self):
        """Recompute checkbox state for the displayed page and the total."""
        checked = current_page_selection(
            self.store, self.records, self.current_page, self.page_size,
        )
        self.param.update(
            checked_ids=[r.id for r in self.records if r.id in checked],
            selected_count=total_selected_count(self.store),
        )
