"""artwork-explorer: paginated collection browser with persistent selection."""

from ._version import __version__
from .core import (
    Artwork,
    Page,
    SelectionStore,
    FetchError,
    InvalidArgument,
    StaleResponse,
    current_page_selection,
    total_selected_count,
)
from .fetch import ArticPageFetcher, InMemoryPageFetcher, PageFetcher


def explore(fetcher=None, page_size=None, port=0, show=True, log_level="INFO"):
    """Launch the artwork browser in a web browser.

    Parameters
    ----------
    fetcher : PageFetcher, optional
        Page source. Defaults to the Art Institute of Chicago API.
    page_size : int, optional
        Rows per page. Defaults to config.PAGE_SIZE.
    port : int
        Port number. 0 = auto-assign.
    show : bool
        Whether to open the browser automatically.
    log_level : str
        Level for the package logger.
    """
    import logging

    from .config import PAGE_SIZE
    from .dashboard.app import BrowserApp

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = BrowserApp(fetcher=fetcher, page_size=page_size or PAGE_SIZE)
    app.serve(port=port, show=show)


__all__ = [
    "__version__",
    "explore",
    "Artwork",
    "Page",
    "SelectionStore",
    "FetchError",
    "InvalidArgument",
    "StaleResponse",
    "current_page_selection",
    "total_selected_count",
    "PageFetcher",
    "ArticPageFetcher",
    "InMemoryPageFetcher",
]
