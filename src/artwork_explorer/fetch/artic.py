"""ArticPageFetcher: pages from the Art Institute of Chicago public API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..config import API_FIELDS, API_URL, REQUEST_TIMEOUT
from ..core.errors import FetchError
from ..core.records import Artwork, Page
from ..core.validation import validate_page_number, validate_page_size
from .base import PageFetcher

logger = logging.getLogger(__name__)


def parse_page_payload(payload: Any, page_number: int, page_size: int) -> Page:
    """Turn a decoded ``/artworks`` response body into a Page.

    Raises FetchError when the body does not have the expected shape.
    """
    if not isinstance(payload, dict):
        raise FetchError(
            f"Expected a JSON object, got {type(payload).__name__}.",
            page_number,
        )
    data = payload.get("data")
    pagination = payload.get("pagination")
    if not isinstance(data, list) or not isinstance(pagination, dict):
        raise FetchError(
            "Response is missing 'data' or 'pagination'.", page_number,
        )

    total = pagination.get("total")
    if isinstance(total, bool) or not isinstance(total, int) or total < 0:
        raise FetchError(
            f"Invalid pagination total: {total!r}.", page_number,
        )
    total_pages = pagination.get("total_pages")
    if total_pages is not None and (
        isinstance(total_pages, bool) or not isinstance(total_pages, int)
    ):
        total_pages = None

    try:
        records = [Artwork.from_dict(item) for item in data]
    except (TypeError, ValueError) as e:
        raise FetchError(f"Malformed artwork: {e}", page_number) from e

    return Page.build(
        records,
        page_number=page_number,
        page_size=page_size,
        total_count=total,
        total_pages=total_pages,
    )


class ArticPageFetcher(PageFetcher):
    """Fetches artwork pages over HTTP with an httpx.AsyncClient.

    If *client* is None, the fetcher creates and owns one; call
    ``aclose()`` when done. An owned client closed by ``aclose()`` is
    replaced on the next fetch.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        base_url: str = API_URL,
        fields: tuple[str, ...] = API_FIELDS,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()
        self._base_url = base_url
        self._fields = fields
        self._timeout = timeout

    async def fetch(self, page_number: int, page_size: int) -> Page:
        page_number = validate_page_number(page_number)
        page_size = validate_page_size(page_size)
        if self._owns_client and self._client.is_closed:
            self._client = httpx.AsyncClient()
        params = {
            "page": page_number,
            "limit": page_size,
            "fields": ",".join(self._fields),
        }
        try:
            response = await self._client.get(
                self._base_url, params=params, timeout=self._timeout,
            )
        except httpx.HTTPError as e:
            logger.warning(
                "Request for page %d failed", page_number, exc_info=True,
            )
            raise FetchError(
                f"Failed to fetch artworks: {e}", page_number,
            ) from e

        if not response.is_success:
            logger.warning(
                "Artworks API returned %d for page %d",
                response.status_code,
                page_number,
            )
            raise FetchError(
                f"Failed to fetch artworks (HTTP {response.status_code}).",
                page_number,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise FetchError(
                "Artworks API returned invalid JSON.", page_number,
            ) from e

        page = parse_page_payload(payload, page_number, page_size)
        logger.debug(
            "Fetched page %d (%d records, %d total)",
            page_number, len(page), page.total_count,
        )
        return page

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
