"""Shared test fixtures for artwork-explorer."""

import pandas as pd
import pytest

from artwork_explorer.core.records import Artwork
from artwork_explorer.fetch.memory import InMemoryPageFetcher

PAGE_SIZE = 12


def make_artworks(n, start_id=1001):
    """n artworks with ids start_id, start_id + 1, ... in collection order."""
    return [
        Artwork(
            id=start_id + i,
            title=f"Artwork {i + 1}",
            place_of_origin="France" if i % 2 == 0 else None,
            artist_display=f"Artist {i % 5}",
            inscriptions=None,
            date_start=1800 + i,
            date_end=1801 + i if i % 3 else None,
        )
        for i in range(n)
    ]


def page_of(records, page_number, page_size=PAGE_SIZE):
    start = (page_number - 1) * page_size
    return records[start:start + page_size]


@pytest.fixture
def collection():
    """100 artworks: 9 pages of 12 (last page has 4)."""
    return make_artworks(100)


@pytest.fixture
def page1(collection):
    return page_of(collection, 1)


@pytest.fixture
def page2(collection):
    return page_of(collection, 2)


@pytest.fixture
def fetcher(collection):
    return InMemoryPageFetcher.from_records(collection)


@pytest.fixture
def artwork_frame():
    """Small frame with an id index, as a local data source."""
    return pd.DataFrame(
        {
            "title": ["Water Lilies", "Nighthawks", "The Bedroom"],
            "place_of_origin": ["France", "United States", None],
            "artist_display": ["Claude Monet", None, "Vincent van Gogh"],
            "inscriptions": [None, None, None],
            "date_start": [1906, 1942, 1889],
            "date_end": [1906, None, 1889],
        },
        index=pd.Index([16568, 111628, 28560], name="id"),
    )
