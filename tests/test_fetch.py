"""Tests for page fetchers: httpx-backed API client and in-memory source."""

import asyncio

import httpx
import pandas as pd
import pytest

from artwork_explorer.core.errors import FetchError, InvalidArgument
from artwork_explorer.fetch.artic import ArticPageFetcher, parse_page_payload
from artwork_explorer.fetch.memory import InMemoryPageFetcher

from conftest import make_artworks


def api_body(records, total, total_pages=None, current_page=1, limit=12):
    pagination = {
        "total": total,
        "limit": limit,
        "offset": (current_page - 1) * limit,
        "current_page": current_page,
    }
    if total_pages is not None:
        pagination["total_pages"] = total_pages
    return {"data": [r.to_dict() for r in records], "pagination": pagination}


def run_fetch(handler, page_number=1, page_size=12):
    async def go():
        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport) as client:
            fetcher = ArticPageFetcher(client=client, base_url="https://api.test/artworks")
            return await fetcher.fetch(page_number, page_size)

    return asyncio.run(go())


class TestParsePagePayload:
    def test_valid(self):
        body = api_body(make_artworks(12), total=100, total_pages=9)
        page = parse_page_payload(body, page_number=1, page_size=12)
        assert len(page) == 12
        assert page.total_count == 100
        assert page.total_pages == 9

    def test_total_pages_missing(self):
        body = api_body(make_artworks(2), total=26)
        page = parse_page_payload(body, page_number=3, page_size=12)
        assert page.total_pages == 3

    def test_not_an_object(self):
        with pytest.raises(FetchError, match="JSON object"):
            parse_page_payload([], 1, 12)

    def test_missing_sections(self):
        with pytest.raises(FetchError, match="missing"):
            parse_page_payload({"data": []}, 1, 12)

    def test_bad_total(self):
        with pytest.raises(FetchError, match="total"):
            parse_page_payload({"data": [], "pagination": {"total": "x"}}, 1, 12)

    def test_malformed_artwork(self):
        body = {"data": [{"id": "abc", "title": "x"}], "pagination": {"total": 1}}
        with pytest.raises(FetchError, match="Malformed artwork") as exc_info:
            parse_page_payload(body, 4, 12)
        assert exc_info.value.page_number == 4


    def test_null_title_keeps_page(self):
        body = {
            "data": [{"id": 1, "title": None}, {"id": 2, "title": "Ok"}],
            "pagination": {"total": 2, "total_pages": 1},
        }
        page = parse_page_payload(body, 1, 12)
        assert [r.id for r in page.records] == [1, 2]
        assert page.records[0].title is None
        assert page.records[1].title == "Ok"


class TestArticPageFetcher:
    def test_request_parameters(self):
        seen = {}

        def handler(request):
            seen["params"] = dict(request.url.params)
            seen["path"] = request.url.path
            return httpx.Response(200, json=api_body(make_artworks(12), total=100))

        run_fetch(handler, page_number=2, page_size=12)
        assert seen["path"] == "/artworks"
        assert seen["params"]["page"] == "2"
        assert seen["params"]["limit"] == "12"
        assert seen["params"]["fields"].split(",")[0] == "id"

    def test_success(self):
        records = make_artworks(12, start_id=500)

        def handler(request):
            return httpx.Response(200, json=api_body(records, total=100, total_pages=9))

        page = run_fetch(handler)
        assert [r.id for r in page.records] == [r.id for r in records]
        assert page.page_number == 1
        assert page.page_size == 12

    def test_non_2xx(self):
        def handler(request):
            return httpx.Response(503, text="unavailable")

        with pytest.raises(FetchError, match="HTTP 503"):
            run_fetch(handler)

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FetchError, match="Failed to fetch"):
            run_fetch(handler)

    def test_invalid_json(self):
        def handler(request):
            return httpx.Response(200, content=b"<html>", headers={"content-type": "text/html"})

        with pytest.raises(FetchError, match="invalid JSON"):
            run_fetch(handler)

    def test_invalid_page_number(self):
        def handler(request):
            raise AssertionError("no request expected")

        with pytest.raises(InvalidArgument):
            run_fetch(handler, page_number=0)

    def test_owned_client_closed(self):
        async def go():
            fetcher = ArticPageFetcher()
            await fetcher.aclose()
            return fetcher._client.is_closed

        assert asyncio.run(go())

    def test_owned_client_reopened_after_close(self, monkeypatch):
        records = make_artworks(12)
        real_client = httpx.AsyncClient

        def handler(request):
            return httpx.Response(200, json=api_body(records, total=12))

        monkeypatch.setattr(
            httpx, "AsyncClient",
            lambda: real_client(transport=httpx.MockTransport(handler)),
        )

        async def go():
            fetcher = ArticPageFetcher()
            await fetcher.aclose()
            page = await fetcher.fetch(1, 12)
            await fetcher.aclose()
            return page

        page = asyncio.run(go())
        assert [r.id for r in page.records] == [r.id for r in records]

    def test_pages(self, fetcher):
        page = asyncio.run(fetcher.fetch(2, 12))
        assert [r.id for r in page.records] == list(range(1013, 1025))
        assert page.total_count == 100
        assert page.total_pages == 9

    def test_last_page_short(self, fetcher):
        page = asyncio.run(fetcher.fetch(9, 12))
        assert len(page) == 4

    def test_beyond_last_page_empty(self, fetcher):
        page = asyncio.run(fetcher.fetch(20, 12))
        assert len(page) == 0

    def test_records_calls(self, fetcher):
        asyncio.run(fetcher.fetch(1, 12))
        asyncio.run(fetcher.fetch(3, 12))
        assert fetcher.calls == [(1, 12), (3, 12)]

    def test_nulls_restored(self, fetcher):
        page = asyncio.run(fetcher.fetch(1, 12))
        assert page.records[0].date_end is None
        assert page.records[1].place_of_origin is None
        assert page.records[1].date_end == 1802

    def test_roundtrip_matches_source(self, collection, fetcher):
        page = asyncio.run(fetcher.fetch(1, 12))
        assert list(page.records) == collection[:12]

    def test_from_id_indexed_frame(self, artwork_frame):
        fetcher = InMemoryPageFetcher(artwork_frame)
        page = asyncio.run(fetcher.fetch(1, 2))
        assert [r.id for r in page.records] == [16568, 111628]
        assert page.records[1].artist_display is None
        assert page.records[1].date_end is None
        assert page.total_pages == 2

    def test_simulated_failure(self, fetcher):
        fetcher.fail_next = True
        with pytest.raises(FetchError):
            asyncio.run(fetcher.fetch(1, 12))
        assert len(asyncio.run(fetcher.fetch(1, 12))) == 12

    def test_requires_id_and_title(self):
        with pytest.raises(ValueError, match="'id' and 'title'"):
            InMemoryPageFetcher(pd.DataFrame({"name": ["x"]}))

    def test_duplicate_ids(self):
        frame = pd.DataFrame({"id": [1, 1], "title": ["a", "b"]})
        with pytest.raises(ValueError, match="unique"):
            InMemoryPageFetcher(frame)
