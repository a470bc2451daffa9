"""Search response records."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from modrinth_client.kernel.types.base62 import Base62Id
from modrinth_client.models.base import ServiceRecord
from modrinth_client.models.enums import ProjectType, SideSupport


class ProjectResult(ServiceRecord):
    """Denormalised summary of one project matched by a search."""

    project_id: Base62Id
    project_type: ProjectType
    slug: str | None = None
    author: str
    title: str
    description: str
    categories: tuple[str, ...]
    display_categories: tuple[str, ...] = ()
    versions: tuple[str, ...]
    latest_version: str | None = None
    # Signed: the service reports -1 when the counter is unavailable.
    downloads: int
    follows: int
    icon_url: str | None = None
    color: int | None = None
    date_created: datetime
    date_modified: datetime
    license: str
    client_side: SideSupport
    server_side: SideSupport
    gallery: tuple[str, ...] = ()
    featured_gallery: str | None = None

    @property
    def downloads_known(self) -> bool:
        return self.downloads >= 0

    @property
    def follows_known(self) -> bool:
        return self.follows >= 0


class SearchResultsPage(ServiceRecord):
    """One page of search hits plus the total for the whole query."""

    hits: tuple[ProjectResult, ...]
    offset: int = Field(ge=0)
    limit: int = Field(ge=0)
    total_hits: int = Field(ge=0)

    def __len__(self) -> int:
        return len(self.hits)


__all__ = ["ProjectResult", "SearchResultsPage"]
