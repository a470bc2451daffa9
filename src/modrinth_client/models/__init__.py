"""Models – decoded service records."""
from modrinth_client.models.base import ServiceRecord
from modrinth_client.models.enums import ProjectStatus, ProjectType, SideSupport
from modrinth_client.models.project import (
    DonationLink,
    GalleryItem,
    ModeratorMessage,
    Project,
    ProjectIdentifier,
    ProjectLicense,
)
from modrinth_client.models.search import ProjectResult, SearchResultsPage

__all__ = [
    "DonationLink",
    "GalleryItem",
    "ModeratorMessage",
    "Project",
    "ProjectIdentifier",
    "ProjectLicense",
    "ProjectResult",
    "ProjectStatus",
    "ProjectType",
    "SearchResultsPage",
    "ServiceRecord",
    "SideSupport",
]
