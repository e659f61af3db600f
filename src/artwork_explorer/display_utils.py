"""Display utilities for table headers and cell values."""

from __future__ import annotations

from typing import Any

import pandas as pd

_ACRONYMS = {"id", "url", "api"}
_SMALL_WORDS = {"of", "and", "the", "in"}

# Headers that read better than their field names
_COLUMN_TITLES = {
    "artist_display": "Artist",
}

# Placeholder shown for a missing value, per column
_MISSING = {
    "title": "Untitled",
    "artist_display": "Unknown",
}
_DEFAULT_MISSING = "—"


def prettify_name(name: str) -> str:
    """Convert snake_case field names to Title Case headers.

    Examples::

        prettify_name("place_of_origin")  # -> "Place of Origin"
        prettify_name("date_start")       # -> "Date Start"
        prettify_name("artist_display")   # -> "Artist"
    """
    if name in _COLUMN_TITLES:
        return _COLUMN_TITLES[name]
    words = name.replace("_", " ").split()
    out = []
    for i, w in enumerate(words):
        if w.lower() in _ACRONYMS:
            out.append(w.upper())
        elif i > 0 and w.lower() in _SMALL_WORDS:
            out.append(w.lower())
        else:
            out.append(w.capitalize())
    return " ".join(out)


def format_cell(column: str, value: Any) -> str:
    """Render one cell, substituting a placeholder for empty values."""
    if value is None or value is pd.NA or (isinstance(value, float) and pd.isna(value)):
        return _MISSING.get(column, _DEFAULT_MISSING)
    if isinstance(value, str) and not value.strip():
        return _MISSING.get(column, _DEFAULT_MISSING)
    return str(value)


def format_display_frame(frame: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of a page frame with every cell rendered as text."""
    display = pd.DataFrame(index=frame.index)
    for column in frame.columns:
        display[column] = [format_cell(column, v) for v in frame[column].tolist()]
    return display


def page_info(current_page: int, total_pages: int) -> str:
    return f"Page {current_page} of {total_pages}"
