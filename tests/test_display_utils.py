"""Tests for header and cell formatting."""

import pandas as pd
import pytest

from artwork_explorer.core.records import page_to_frame
from artwork_explorer.display_utils import (
    format_cell,
    format_display_frame,
    page_info,
    prettify_name,
)

from conftest import make_artworks


class TestPrettifyName:
    @pytest.mark.parametrize("name, expected", [
        ("title", "Title"),
        ("place_of_origin", "Place of Origin"),
        ("artist_display", "Artist"),
        ("date_start", "Date Start"),
        ("inscriptions", "Inscriptions"),
        ("image_id", "Image ID"),
    ])
    def test_names(self, name, expected):
        assert prettify_name(name) == expected


class TestFormatCell:
    def test_value_passthrough(self):
        assert format_cell("title", "Nighthawks") == "Nighthawks"
        assert format_cell("date_start", 1942) == "1942"

    def test_missing_title(self):
        assert format_cell("title", None) == "Untitled"
        assert format_cell("title", "  ") == "Untitled"

    def test_missing_artist(self):
        assert format_cell("artist_display", None) == "Unknown"

    def test_missing_other(self):
        assert format_cell("place_of_origin", None) == "—"
        assert format_cell("date_end", pd.NA) == "—"
        assert format_cell("date_end", float("nan")) == "—"


class TestFormatDisplayFrame:
    def test_all_text_same_index(self):
        frame = page_to_frame(make_artworks(3))
        display = format_display_frame(frame)
        assert display.index.equals(frame.index)
        assert list(display.columns) == list(frame.columns)
        assert display.loc[1001, "date_end"] == "—"
        assert display.loc[1002, "date_end"] == "1802"
        assert display.loc[1002, "place_of_origin"] == "—"

    def test_empty(self):
        display = format_display_frame(page_to_frame([]))
        assert display.empty


def test_page_info():
    assert page_info(3, 9) == "Page 3 of 9"
