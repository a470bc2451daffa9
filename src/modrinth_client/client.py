"""ModrinthClient – facade over settings, transport and API requests."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from modrinth_client.adapters.http import HttpxTransport, Transport
from modrinth_client.api.paginator import SearchPaginator
from modrinth_client.api.projects import ProjectRequest
from modrinth_client.api.search import SearchRequest
from modrinth_client.config import ClientSettings, EnvSettingsLoader
from modrinth_client.kernel.types.base62 import Base62Id
from modrinth_client.models.project import Project, ProjectIdentifier
from modrinth_client.models.search import SearchResultsPage
from modrinth_client.query.params import SearchParameters

logger = logging.getLogger(__name__)


class ModrinthClient:
    """Entry point for library users.

    Usage::

        with ModrinthClient.from_env() as client:
            for hit in client.search_iter(SearchParameters(query="sodium", limit=50)):
                print(hit.title)
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(
            timeout=self._settings.timeout,
            user_agent=self._settings.user_agent,
        )
        self._search = SearchRequest(self._transport, self._settings.base_url)
        self._projects = ProjectRequest(self._transport, self._settings.base_url)
        logger.debug("client.created settings=%r", self._settings)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        transport: Transport | None = None,
    ) -> "ModrinthClient":
        """Build a client from ``MODRINTH_*`` environment variables."""
        return cls(EnvSettingsLoader(environ).load(ClientSettings), transport)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    def __enter__(self) -> "ModrinthClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            self._transport.close()

    def search(self, params: SearchParameters | None = None) -> SearchResultsPage:
        """Fetch one page of search results."""
        return self._search.execute(params or SearchParameters(), self._settings.token)

    def search_iter(self, params: SearchParameters | None = None) -> SearchPaginator:
        """Iterate over every hit of a search; see :class:`SearchPaginator`."""
        return SearchPaginator(self._search, params, self._settings.token)

    def get_project(self, identifier: ProjectIdentifier | Base62Id | int | str) -> Project:
        """Fetch one project by numeric id or slug."""
        return self._projects.execute(identifier, self._settings.token)


__all__ = ["ModrinthClient"]
