"""Project detail records."""

from __future__ import annotations

import dataclasses
from datetime import datetime

from modrinth_client.kernel.types.base62 import Base62Id
from modrinth_client.models.base import ServiceRecord
from modrinth_client.models.enums import ProjectStatus, ProjectType, SideSupport


class ModeratorMessage(ServiceRecord):
    message: str
    body: str | None = None


class ProjectLicense(ServiceRecord):
    id: str
    name: str
    url: str | None = None


class DonationLink(ServiceRecord):
    id: str
    platform: str
    url: str


class GalleryItem(ServiceRecord):
    url: str
    featured: bool
    title: str | None = None
    description: str | None = None
    created: datetime
    ordering: int | None = None


class Project(ServiceRecord):
    """Full project as returned by ``GET /project/{id|slug}``."""

    id: Base62Id
    slug: str | None = None
    project_type: ProjectType
    team: Base62Id
    title: str
    description: str
    body: str
    published: datetime
    updated: datetime
    approved: datetime | None = None
    status: ProjectStatus
    moderator_message: ModeratorMessage | None = None
    license: ProjectLicense
    client_side: SideSupport
    server_side: SideSupport
    downloads: int
    followers: int
    categories: tuple[str, ...]
    additional_categories: tuple[str, ...] = ()
    game_versions: tuple[str, ...] = ()
    loaders: tuple[str, ...] = ()
    versions: tuple[Base62Id, ...]
    icon_url: str | None = None
    issues_url: str | None = None
    source_url: str | None = None
    wiki_url: str | None = None
    discord_url: str | None = None
    donation_urls: tuple[DonationLink, ...] | None = None
    gallery: tuple[GalleryItem, ...] = ()


@dataclasses.dataclass(frozen=True, slots=True)
class ProjectIdentifier:
    """A project addressed either by numeric id or by slug."""

    id: Base62Id | None = None
    slug: str | None = None

    def __post_init__(self) -> None:
        if (self.id is None) == (self.slug is None):
            raise ValueError("ProjectIdentifier needs exactly one of id or slug")
        if self.slug is not None and not self.slug:
            raise ValueError("ProjectIdentifier slug must not be empty")

    @classmethod
    def of(cls, value: "ProjectIdentifier | Base62Id | int | str") -> "ProjectIdentifier":
        """Coerce an int/``Base62Id`` to an id and any string to a slug-or-id path segment."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Base62Id):
            return cls(id=value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(id=Base62Id(value))
        if isinstance(value, str):
            return cls(slug=value)
        raise TypeError(f"Cannot identify a project by {type(value).__name__}")

    def __str__(self) -> str:
        return str(self.id) if self.id is not None else str(self.slug)


__all__ = [
    "DonationLink",
    "GalleryItem",
    "ModeratorMessage",
    "Project",
    "ProjectIdentifier",
    "ProjectLicense",
]
