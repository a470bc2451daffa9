"""API – module-level shortcuts for one-off calls."""
from __future__ import annotations

from modrinth_client.adapters.http.port import Transport
from modrinth_client.api.paginator import SearchPaginator
from modrinth_client.api.search import DEFAULT_BASE_URL, SearchRequest
from modrinth_client.models.search import SearchResultsPage
from modrinth_client.query.params import SearchParameters


def get_search(
    params: SearchParameters,
    transport: Transport,
    token: str | None = None,
    base_url: str = DEFAULT_BASE_URL,
) -> SearchResultsPage:
    """Fetch a single page of search results."""
    return SearchRequest(transport, base_url).execute(params, token)


def get_search_iter(
    params: SearchParameters,
    transport: Transport,
    token: str | None = None,
    base_url: str = DEFAULT_BASE_URL,
) -> SearchPaginator:
    """Iterate over every hit of a search, fetching pages lazily."""
    return SearchPaginator(SearchRequest(transport, base_url), params, token)


__all__ = ["get_search", "get_search_iter"]
