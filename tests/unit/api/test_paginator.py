"""Unit tests – SearchPaginator state machine."""
from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from modrinth_client.adapters.http import HttpxTransport
from modrinth_client.api import PaginatorPhase, SearchPaginator, SearchRequest, get_search_iter
from modrinth_client.kernel.errors import DecodeError, ErrorKind, HttpStatusError, TransportError
from modrinth_client.query import SearchParameters
from modrinth_client.testing.fakes import FakeTransport
from payloads import make_hit, make_page


def _query(url: str) -> dict[str, str]:
    return {k: v[0] for k, v in parse_qs(urlsplit(url).query).items()}


def _paginator(
    transport: FakeTransport,
    params: SearchParameters | None = None,
    token: str | None = None,
) -> SearchPaginator:
    return SearchPaginator(SearchRequest(transport, "https://api.test/v2"), params, token)


class TestProbeThenPage:
    def test_yields_all_hits_in_order(self, transport: FakeTransport) -> None:
        transport.reply(
            make_page([make_hit(1)], limit=1, total_hits=3),
            make_page([make_hit(2), make_hit(3)], offset=1, limit=10, total_hits=3),
        )
        slugs = [hit.slug for hit in _paginator(transport, SearchParameters(query="q"))]
        assert slugs == ["project-1", "project-2", "project-3"]

    def test_probe_uses_limit_one_then_caller_params(self, transport: FakeTransport) -> None:
        transport.reply(
            make_page([make_hit(1)], limit=1, total_hits=3),
            make_page([make_hit(2), make_hit(3)], offset=1, total_hits=3),
        )
        list(_paginator(transport, SearchParameters(query="q", limit=25)))
        probe, full = (_query(url) for url in transport.urls)
        assert probe == {"query": "q", "limit": "1"}
        assert full == {"query": "q", "offset": "1", "limit": "25"}

    def test_probe_keeps_starting_offset(self, transport: FakeTransport) -> None:
        transport.reply(make_page([], offset=40, limit=1, total_hits=0))
        list(_paginator(transport, SearchParameters(offset=40)))
        assert _query(transport.urls[0]) == {"offset": "40", "limit": "1"}

    def test_size_hint(self, transport: FakeTransport) -> None:
        transport.reply(
            make_page([make_hit(1)], limit=1, total_hits=3),
            make_page([make_hit(2), make_hit(3)], offset=1, total_hits=3),
        )
        pages = _paginator(transport)
        assert pages.size_hint() == (0, None)
        assert pages.total_hits is None
        next(pages)
        assert pages.size_hint() == (0, 3)

    def test_phases(self, transport: FakeTransport) -> None:
        transport.reply(
            make_page([make_hit(1)], limit=1, total_hits=2),
            make_page([make_hit(2)], offset=1, total_hits=2),
        )
        pages = _paginator(transport)
        assert pages.phase is PaginatorPhase.FRESH
        next(pages)
        assert pages.phase is PaginatorPhase.PAGING
        next(pages)
        with pytest.raises(StopIteration):
            next(pages)
        assert pages.phase is PaginatorPhase.EXHAUSTED
        assert pages.error is None

    def test_token_forwarded_on_every_fetch(self, transport: FakeTransport) -> None:
        transport.reply(
            make_page([make_hit(1)], limit=1, total_hits=2),
            make_page([make_hit(2)], offset=1, total_hits=2),
        )
        list(_paginator(transport, token="secret"))
        assert [call.token for call in transport.calls] == ["secret", "secret"]


class TestBuffering:
    def test_buffered_hits_need_no_request(self, transport: FakeTransport) -> None:
        transport.reply(
            make_page([make_hit(1)], limit=1, total_hits=4),
            make_page([make_hit(2), make_hit(3), make_hit(4)], offset=1, total_hits=4),
        )
        pages = _paginator(transport)
        next(pages)
        next(pages)
        assert len(transport.calls) == 2
        next(pages)
        next(pages)
        assert len(transport.calls) == 2

    def test_offset_advances_by_hits_received(self, transport: FakeTransport) -> None:
        transport.reply(
            make_page([make_hit(1)], limit=1, total_hits=5),
            make_page([make_hit(2), make_hit(3)], offset=1, limit=10, total_hits=5),
            make_page([make_hit(4), make_hit(5)], offset=3, limit=10, total_hits=5),
        )
        pages = _paginator(transport, SearchParameters(limit=10))
        assert len(list(pages)) == 5
        assert [_query(url).get("offset") for url in transport.urls] == [None, "1", "3"]
        assert pages.offset == 5

    def test_stops_at_total_without_extra_request(self, transport: FakeTransport) -> None:
        transport.reply(
            make_page([make_hit(1)], limit=1, total_hits=2),
            make_page([make_hit(2)], offset=1, total_hits=2),
        )
        list(_paginator(transport))
        assert len(transport.calls) == 2

    def test_empty_page_terminates(self, transport: FakeTransport) -> None:
        transport.reply(
            make_page([make_hit(1)], limit=1, total_hits=10),
            make_page([], offset=1, total_hits=10),
        )
        pages = _paginator(transport)
        assert [h.slug for h in pages] == ["project-1"]
        assert pages.phase is PaginatorPhase.EXHAUSTED
        with pytest.raises(StopIteration):
            next(pages)
        assert len(transport.calls) == 2

    def test_no_results(self, transport: FakeTransport) -> None:
        transport.reply(make_page([], limit=1, total_hits=0))
        pages = _paginator(transport)
        assert list(pages) == []
        assert pages.size_hint() == (0, 0)
        assert pages.error is None

    def test_total_hits_refreshed_from_each_page(self, transport: FakeTransport) -> None:
        transport.reply(
            make_page([make_hit(1)], limit=1, total_hits=2),
            make_page([make_hit(2), make_hit(3)], offset=1, total_hits=3),
        )
        pages = _paginator(transport)
        assert len(list(pages)) == 3
        assert pages.total_hits == 3


class TestFailure:
    def test_second_fetch_failure_keeps_buffered_hits(self, transport: FakeTransport) -> None:
        transport.reply(make_page([make_hit(1)], limit=1, total_hits=3))
        transport.fail(TransportError("connection reset"))
        pages = _paginator(transport)
        assert [h.slug for h in pages] == ["project-1"]
        assert isinstance(pages.error, TransportError)
        assert pages.error.kind is ErrorKind.TRANSPORT
        assert pages.phase is PaginatorPhase.FAILED

    def test_error_not_reraised_and_no_more_requests(self, transport: FakeTransport) -> None:
        transport.fail(HttpStatusError(503, url="u"))
        pages = _paginator(transport)
        for _ in range(3):
            with pytest.raises(StopIteration):
                next(pages)
        assert len(transport.calls) == 1
        assert isinstance(pages.error, HttpStatusError)

    def test_decode_failure_captured(self, transport: FakeTransport) -> None:
        transport.reply({"hits": "nope"})
        pages = _paginator(transport)
        assert list(pages) == []
        assert isinstance(pages.error, DecodeError)
        assert pages.error.kind is ErrorKind.DECODE
        assert pages.size_hint() == (0, None)

    def test_failure_after_probe_keeps_total(self, transport: FakeTransport) -> None:
        transport.reply(make_page([make_hit(1)], limit=1, total_hits=7)).fail()
        pages = _paginator(transport)
        list(pages)
        assert pages.total_hits == 7
        assert pages.offset == 1

    def test_oversized_url_captured(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=make_page([], limit=1, total_hits=0))

        client = httpx.Client(transport=httpx.MockTransport(handler))
        request = SearchRequest(HttpxTransport(client=client), "https://api.test/v2")
        pages = SearchPaginator(request, SearchParameters(query="x" * 70_000))
        assert list(pages) == []
        assert isinstance(pages.error, TransportError)
        assert pages.phase is PaginatorPhase.FAILED
        client.close()


class TestGetSearchIter:
    def test_shortcut(self, transport: FakeTransport) -> None:
        transport.reply(make_page([make_hit(1)], limit=1, total_hits=1))
        pages = get_search_iter(SearchParameters(query="x"), transport, token="t")
        assert isinstance(pages, SearchPaginator)
        assert [h.slug for h in pages] == ["project-1"]
        assert iter(pages) is pages
