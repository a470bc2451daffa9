"""API – SearchPaginator: lazy iteration over every hit of a search.

The first fetch is a ``limit=1`` probe that learns ``total_hits`` cheaply;
later fetches use the caller's parameters. The cursor (``offset``) advances by
the number of hits actually received, so short pages are handled.

Iteration ends when the service returns an empty page, when the cursor reaches
the last known ``total_hits``, or when a fetch fails. A failure is recorded in
:attr:`SearchPaginator.error` and is never re-raised; check it after the loop
to tell normal exhaustion from an aborted one::

    pages = SearchPaginator(request, SearchParameters(query="sodium"))
    for hit in pages:
        ...
    if pages.error is not None:
        ...

Not thread-safe: every :meth:`__next__` mutates the buffer and cursor in place.
"""
from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import Iterator

from modrinth_client.api.search import SearchRequest
from modrinth_client.kernel.errors import ModrinthError
from modrinth_client.models.search import ProjectResult, SearchResultsPage
from modrinth_client.query.params import SearchParameters

logger = logging.getLogger(__name__)


class PaginatorPhase(str, Enum):
    FRESH = "FRESH"
    PROBING = "PROBING"
    PAGING = "PAGING"
    EXHAUSTED = "EXHAUSTED"
    FAILED = "FAILED"


class SearchPaginator(Iterator[ProjectResult]):
    """Iterator over the hits of a search, fetching pages on demand.

    At most one request is issued per :meth:`__next__` call.
    """

    def __init__(
        self,
        request: SearchRequest,
        params: SearchParameters | None = None,
        token: str | None = None,
    ) -> None:
        self._request = request
        self._params = params or SearchParameters()
        self._token = token
        self._buffer: deque[ProjectResult] = deque()
        self._total_hits: int | None = None
        self._error: ModrinthError | None = None
        self._phase = PaginatorPhase.FRESH

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def phase(self) -> PaginatorPhase:
        return self._phase

    @property
    def error(self) -> ModrinthError | None:
        """The error that stopped iteration, or ``None``."""
        return self._error

    @property
    def total_hits(self) -> int | None:
        """Last ``total_hits`` reported by the service; ``None`` before the first fetch."""
        return self._total_hits

    @property
    def offset(self) -> int:
        """Offset the next fetch will request."""
        return self._params.offset or 0

    @property
    def params(self) -> SearchParameters:
        return self._params

    def size_hint(self) -> tuple[int, int | None]:
        """``(lower, upper)`` bound on the number of hits.

        The upper bound is the last known ``total_hits`` and may be stale.
        """
        return 0, self._total_hits

    # ------------------------------------------------------------------
    # Iterator protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> "SearchPaginator":
        return self

    def __next__(self) -> ProjectResult:
        if not self._buffer:
            self._fill()
        if not self._buffer:
            raise StopIteration
        return self._buffer.popleft()

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def _fill(self) -> None:
        match self._phase:
            case PaginatorPhase.EXHAUSTED | PaginatorPhase.FAILED:
                return
            case PaginatorPhase.FRESH | PaginatorPhase.PROBING:
                self._phase = PaginatorPhase.PROBING
                params = self._params.with_limit(1)
                logger.debug("paginator.probe offset=%d", self.offset)
            case PaginatorPhase.PAGING:
                if self._total_hits is not None and self.offset >= self._total_hits:
                    logger.debug(
                        "paginator.exhausted offset=%d total_hits=%d", self.offset, self._total_hits
                    )
                    self._phase = PaginatorPhase.EXHAUSTED
                    return
                params = self._params
                logger.debug("paginator.page offset=%d limit=%s", self.offset, params.limit)

        try:
            page = self._request.execute(params, self._token)
        except ModrinthError as exc:
            logger.warning(
                "paginator.failed offset=%d kind=%s code=%s", self.offset, exc.kind.value, exc.code
            )
            self._error = exc
            self._phase = PaginatorPhase.FAILED
            return

        self._accept(page)

    def _accept(self, page: SearchResultsPage) -> None:
        self._total_hits = page.total_hits
        self._buffer.extend(page.hits)
        self._params = self._params.with_offset(self.offset + len(page.hits))
        if not page.hits:
            logger.debug("paginator.empty_page offset=%d", self.offset)
            self._phase = PaginatorPhase.EXHAUSTED
        else:
            self._phase = PaginatorPhase.PAGING


__all__ = ["PaginatorPhase", "SearchPaginator"]
