"""API – single search round trip."""
from __future__ import annotations

import logging

from modrinth_client.adapters.http.port import Transport
from modrinth_client.models.search import SearchResultsPage
from modrinth_client.query.params import SearchParameters
from modrinth_client.query.query_string import to_query_string

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.modrinth.com/v2"


class SearchRequest:
    """Build the search URL, GET it through *transport* and decode the page.

    One attempt per call; transport errors and decode errors propagate as
    :class:`~modrinth_client.kernel.errors.ModrinthError` subclasses.
    """

    def __init__(self, transport: Transport, base_url: str = DEFAULT_BASE_URL) -> None:
        self._transport = transport
        self._endpoint = f"{base_url.rstrip('/')}/search"

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def url_for(self, params: SearchParameters) -> str:
        query = to_query_string(params)
        return f"{self._endpoint}?{query}" if query else self._endpoint

    def execute(self, params: SearchParameters, token: str | None = None) -> SearchResultsPage:
        url = self.url_for(params)
        logger.debug("search.request url=%s", url)
        body = self._transport.get(url, token)
        page = SearchResultsPage.decode(body)
        logger.debug(
            "search.response hits=%d offset=%d limit=%d total_hits=%d",
            len(page.hits), page.offset, page.limit, page.total_hits,
        )
        return page


__all__ = ["DEFAULT_BASE_URL", "SearchRequest"]
