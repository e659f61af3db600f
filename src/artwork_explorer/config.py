"""Configuration constants for the artwork explorer."""

# Rows fetched and displayed per page.
PAGE_SIZE = 12

# Smallest count accepted by the "select first N rows" operation.
MIN_BULK_COUNT = 1

API_URL = "https://api.artic.edu/api/v1/artworks"

# Fields requested from the remote source (one per table column, plus id).
API_FIELDS = (
    "id",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
)

# Seconds before a page request is abandoned.
REQUEST_TIMEOUT = 10.0
