"""API – project lookup by id or slug."""
from __future__ import annotations

import logging
from urllib.parse import quote

from modrinth_client.adapters.http.port import Transport
from modrinth_client.api.search import DEFAULT_BASE_URL
from modrinth_client.kernel.types.base62 import Base62Id
from modrinth_client.models.project import Project, ProjectIdentifier

logger = logging.getLogger(__name__)


class ProjectRequest:
    """``GET {base_url}/project/{id|slug}`` decoded into :class:`Project`."""

    def __init__(self, transport: Transport, base_url: str = DEFAULT_BASE_URL) -> None:
        self._transport = transport
        self._base_url = base_url.rstrip("/")

    def url_for(self, identifier: ProjectIdentifier | Base62Id | int | str) -> str:
        segment = str(ProjectIdentifier.of(identifier))
        return f"{self._base_url}/project/{quote(segment, safe='')}"

    def execute(
        self,
        identifier: ProjectIdentifier | Base62Id | int | str,
        token: str | None = None,
    ) -> Project:
        url = self.url_for(identifier)
        logger.debug("project.request url=%s", url)
        return Project.decode(self._transport.get(url, token))


__all__ = ["ProjectRequest"]
