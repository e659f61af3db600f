"""BrowserApp: assembles the Panel template and serves the browser."""

from __future__ import annotations

import logging

import panel as pn

from ..config import MIN_BULK_COUNT, PAGE_SIZE
from ..core.errors import InvalidArgument
from ..core.projector import selection_summary
from ..fetch.artic import ArticPageFetcher
from ..fetch.base import PageFetcher
from .state import BrowserState
from .table_view import TableView

logger = logging.getLogger(__name__)

_BROWSER_CSS = """
:root, :host {
  --design-primary-color: #1a73e8;
  --design-secondary-color: #1557b0;
  --panel-primary-color: #1a73e8;
}

.bk-btn-primary {
  border-radius: 6px !important;
  background-color: #1a73e8 !important;
  border-color: #1a73e8 !important;
  color: #ffffff !important;
  font-weight: 500 !important;
  text-transform: none !important;
}
.bk-btn-default {
  border-radius: 6px !important;
  text-transform: none !important;
}

.ae-selection-bar {
  border: 1px solid #e0e0e0;
  border-radius: 6px;
  padding: 4px 12px;
  background: #ffffff;
}

.ae-error {
  text-align: center;
  padding: 64px 24px;
}
"""

_DESCRIPTION = (
    "Explore artworks from the museum's collection with server-side "
    "pagination and persistent selection"
)


class BrowserApp:
    """Paginated artwork browser with persistent selection.

    Layout:
    - Header: title and description
    - Selection bar: "N rows selected", Custom Selection, Deselect All
    - Table: one page of artworks with checkboxes, plus pagination
    - Error screen: replaces the table when a page fails to load
    - Modal: "Select Rows" form feeding the bulk selection
    """

    def __init__(
        self,
        fetcher: PageFetcher | None = None,
        page_size: int = PAGE_SIZE,
    ) -> None:
        pn.extension("tabulator", notifications=True, sizing_mode="stretch_width")
        pn.config.raw_css.append(_BROWSER_CSS)

        self.state = BrowserState(
            fetcher=fetcher if fetcher is not None else ArticPageFetcher(),
            page_size=page_size,
        )
        self.table_view = TableView()
        self._template: pn.template.MaterialTemplate | None = None
        self._active_sessions = 0

        # View -> state
        self.table_view.on_selection_toggled(self.state.toggle_selection)
        self.table_view.on_page_requested(self.state.load_page)

        # State -> view
        self.state.param.watch(
            self._on_page_state_change,
            ["records", "checked_ids", "current_page", "total_pages"],
        )
        self.state.param.watch(self._on_loading_change, "is_loading")
        self.state.param.watch(self._on_error_change, "error_text")
        self.state.param.watch(self._on_count_change, "selected_count")

        self._build_widgets()

    def _build_widgets(self) -> None:
        # --- Selection bar ---
        self.count_text = pn.pane.Markdown("", margin=(5, 10))
        self.custom_select_button = pn.widgets.Button(
            name="Custom Selection", button_type="default", width=150,
        )
        self.deselect_all_button = pn.widgets.Button(
            name="Deselect All", button_type="default", width=120,
        )
        self.custom_select_button.on_click(self._on_open_custom_selection)
        self.deselect_all_button.on_click(self._on_deselect_all)
        self.selection_bar = pn.Row(
            self.count_text,
            pn.layout.HSpacer(),
            self.custom_select_button,
            self.deselect_all_button,
            css_classes=["ae-selection-bar"],
            visible=False,
            sizing_mode="stretch_width",
        )

        # --- Custom selection form (shown in the template modal) ---
        self.count_input = pn.widgets.IntInput(
            name="Enter the number of rows to select across all pages",
            value=None,
            start=MIN_BULK_COUNT,
            placeholder="e.g., 50",
        )
        self.submit_button = pn.widgets.Button(name="Submit", button_type="primary")
        self.cancel_button = pn.widgets.Button(name="Cancel", button_type="default")
        self.submit_button.on_click(self._on_submit_custom_selection)
        self.cancel_button.on_click(self._on_cancel_custom_selection)

        # --- Error screen ---
        self.error_text = pn.pane.Markdown("", css_classes=["ae-error"])
        self.retry_button = pn.widgets.Button(
            name="Retry", button_type="primary", width=100, align="center",
        )
        self.retry_button.on_click(self._on_retry)
        self.error_panel = pn.Column(
            self.error_text, self.retry_button,
            visible=False, sizing_mode="stretch_width",
        )

        self.table_panel = self.table_view.build_panel()

    # ------------------------------------------------------------------
    # State -> view
    # ------------------------------------------------------------------

    def _on_page_state_change(self, *events) -> None:
        s = self.state
        self.table_view.render(
            s.records,
            set(s.checked_ids),
            s.current_page,
            s.total_pages,
            loading=s.is_loading,
        )

    def _on_loading_change(self, event) -> None:
        self.table_view.set_loading(event.new)

    def _on_error_change(self, event) -> None:
        failed = bool(event.new)
        self.error_text.object = (
            "## Failed to load artworks\n\n"
            "Unable to fetch data from the Art Institute of Chicago API. "
            "Please try again later."
        ) if failed else ""
        self.error_panel.visible = failed
        self.table_panel.visible = not failed
        self.selection_bar.visible = not failed and self.state.selected_count > 0

    def _on_count_change(self, event) -> None:
        count = event.new
        self.count_text.object = f"**{selection_summary(count)}**"
        self.selection_bar.visible = count > 0 and not self.state.error_text

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------

    def _on_open_custom_selection(self, event) -> None:
        if self._template is not None:
            self._template.open_modal()

    def _on_cancel_custom_selection(self, event) -> None:
        self.count_input.value = None
        if self._template is not None:
            self._template.close_modal()

    def _on_submit_custom_selection(self, event) -> None:
        try:
            self.state.apply_bulk_select(self.count_input.value)
        except InvalidArgument as e:
            self._notify("error", f"Invalid input: {e}")
            return
        self.count_input.value = None
        if self._template is not None:
            self._template.close_modal()
        self._notify("success", f"Selection updated. {self.state.status_text}")

    def _on_deselect_all(self, event) -> None:
        self.state.clear_selection()

    async def _on_retry(self, event) -> None:
        await self.state.retry()

    async def _initial_load(self) -> None:
        await self.state.load_page(1)

    @staticmethod
    def _notify(kind: str, message: str) -> None:
        notifications = pn.state.notifications
        if notifications is None:
            logger.info("%s", message)
            return
        getattr(notifications, kind)(message, duration=4000)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _build_template(self) -> pn.template.MaterialTemplate:
        template = pn.template.MaterialTemplate(
            title="Art Institute of Chicago Collection",
            header_background="#fafafa",
            header_color="#202124",
        )
        template.main.append(
            pn.Column(
                pn.pane.Markdown(_DESCRIPTION),
                self.selection_bar,
                self.table_panel,
                self.error_panel,
                sizing_mode="stretch_width",
            )
        )
        template.modal.append(
            pn.Column(
                pn.pane.Markdown("### Select Rows"),
                self.count_input,
                pn.Row(self.submit_button, self.cancel_button),
            )
        )
        self._template = template
        return template

    def _create_session(self) -> pn.template.MaterialTemplate:
        """Build the page for a browser session and load page 1 once it opens."""
        template = self._build_template()
        self._active_sessions += 1
        pn.state.onload(self._initial_load)
        pn.state.on_session_destroyed(self._on_session_destroyed)
        return template

    def _on_session_destroyed(self, session_context) -> None:
        self._active_sessions = max(0, self._active_sessions - 1)
        if self._active_sessions == 0:
            logger.debug("Last session closed; releasing the page fetcher")
            pn.state.execute(self.state.fetcher.aclose)

    def serve(self, port: int = 0, show: bool = True, **kwargs) -> None:
        """Start the Panel server and optionally open the browser.

        Parameters
        ----------
        port : int
            Port number. 0 = auto-assign.
        show : bool
            Whether to open the browser automatically.
        **kwargs
            Additional keyword arguments passed to pn.serve().
        """
        pn.serve(
            self._create_session,
            port=port or 0,
            show=show,
            title="Artwork Explorer",
            **kwargs,
        )
