"""Service enumerations that tolerate values the service adds later."""

from __future__ import annotations

from enum import Enum
from typing import Any


class _TolerantEnum(str, Enum):
    """Unrecognised tokens resolve to ``UNKNOWN`` instead of failing."""

    @classmethod
    def _missing_(cls, value: Any) -> Any:
        return cls.__members__.get("UNKNOWN")


class ProjectType(_TolerantEnum):
    MOD = "mod"
    MODPACK = "modpack"
    RESOURCEPACK = "resourcepack"
    SHADER = "shader"
    PLUGIN = "plugin"
    DATAPACK = "datapack"
    UNKNOWN = "unknown"


class SideSupport(_TolerantEnum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    UNSUPPORTED = "unsupported"
    UNKNOWN = "unknown"


class ProjectStatus(_TolerantEnum):
    APPROVED = "approved"
    ARCHIVED = "archived"
    REJECTED = "rejected"
    DRAFT = "draft"
    UNLISTED = "unlisted"
    PROCESSING = "processing"
    WITHHELD = "withheld"
    SCHEDULED = "scheduled"
    PRIVATE = "private"
    UNKNOWN = "unknown"


__all__ = ["ProjectStatus", "ProjectType", "SideSupport"]
