"""Selection model and record types."""

from .errors import FetchError, InvalidArgument, StaleResponse
from .projector import current_page_selection, selection_summary, total_selected_count
from .records import Artwork, Page, global_index, page_to_frame
from .selection_store import SelectionStore

__all__ = [
    "Artwork",
    "Page",
    "SelectionStore",
    "FetchError",
    "InvalidArgument",
    "StaleResponse",
    "current_page_selection",
    "global_index",
    "page_to_frame",
    "selection_summary",
    "total_selected_count",
]
