"""Search request parameters."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Iterable, Mapping

from modrinth_client.kernel.errors import ValidationError
from modrinth_client.query.facets import (
    CategoryFacet,
    CustomFacet,
    LicenseFacet,
    ProjectTypeFacet,
    SearchFacet,
    SearchFilters,
    VersionFacet,
)


class SearchIndex(str, Enum):
    """Sort order of search results."""

    RELEVANCE = "relevance"
    DOWNLOADS = "downloads"
    FOLLOWS = "follows"
    NEWEST = "newest"
    UPDATED = "updated"


@dataclasses.dataclass(frozen=True)
class SearchParameters:
    """Parameters of one search call.

    ``None`` means "not provided": the field is left out of the query string.
    """

    query: str | None = None
    facets: SearchFilters[SearchFacet] | None = None
    index: SearchIndex | None = None
    offset: int | None = None
    limit: int | None = None
    filters: SearchFilters[str] | None = None

    def __post_init__(self) -> None:
        errors: list[dict[str, Any]] = []
        if self.query is not None and not isinstance(self.query, str):
            errors.append({"field": "query", "error": "must be a string"})
        for name in ("offset", "limit"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                errors.append({"field": name, "error": "must be an integer"})
            elif value < 0:
                errors.append({"field": name, "error": "must be >= 0"})
        if errors:
            raise ValidationError("Invalid search parameters", errors=errors)

        for name in ("facets", "filters"):
            value = getattr(self, name)
            if value is None or isinstance(value, SearchFilters):
                continue
            try:
                wrapped = SearchFilters(value)
            except TypeError as exc:
                raise ValidationError(
                    f"{name} must be an array of arrays",
                    errors=[{"field": name, "error": "malformed"}],
                    cause=exc,
                ) from exc
            object.__setattr__(self, name, wrapped)
        if self.index is not None and not isinstance(self.index, SearchIndex):
            object.__setattr__(self, "index", SearchIndex(self.index))

    def with_offset(self, offset: int) -> "SearchParameters":
        return dataclasses.replace(self, offset=offset)

    def with_limit(self, limit: int) -> "SearchParameters":
        return dataclasses.replace(self, limit=limit)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchParameters":
        """Build parameters from a plain mapping (e.g. a saved search).

        The schema is closed: unknown keys raise :class:`ValidationError`.
        Facets are given as ``[[{"name": ..., "value": ...}, ...], ...]`` or as
        already-rendered ``"name:'value'"`` strings.
        """
        known = {field.name for field in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError(
                f"Unknown search parameter(s): {', '.join(unknown)}",
                errors=[{"field": key, "error": "unknown field"} for key in unknown],
            )

        kwargs = dict(data)
        if kwargs.get("facets") is not None:
            kwargs["facets"] = SearchFilters(
                [_facet_from_raw(raw) for raw in group]
                for group in _raw_groups("facets", kwargs["facets"])
            )
        if kwargs.get("index") is not None:
            try:
                kwargs["index"] = SearchIndex(kwargs["index"])
            except ValueError as exc:
                raise ValidationError(
                    f"Unknown search index {kwargs['index']!r}",
                    errors=[{"field": "index", "error": "unknown value"}],
                    cause=exc,
                ) from exc
        return cls(**kwargs)


_FACET_TYPES: dict[str, type[SearchFacet]] = {
    facet_cls.name: facet_cls
    for facet_cls in (CategoryFacet, VersionFacet, LicenseFacet, ProjectTypeFacet)
}


def _raw_groups(name: str, raw: Any) -> list[Any]:
    if isinstance(raw, SearchFilters):
        return list(raw)
    if isinstance(raw, (list, tuple)) and all(isinstance(group, (list, tuple)) for group in raw):
        return list(raw)
    raise ValidationError(
        f"{name} must be an array of arrays",
        errors=[{"field": name, "error": "malformed"}],
    )


def _facet_from_raw(raw: Any) -> SearchFacet:
    if isinstance(raw, SearchFacet):
        return raw
    if isinstance(raw, Mapping):
        extra = set(raw) - {"name", "value"}
        if extra or "name" not in raw or "value" not in raw:
            raise ValidationError(
                f"Facet mapping must have exactly 'name' and 'value': {dict(raw)!r}",
                errors=[{"field": "facets", "error": "malformed facet"}],
            )
        name, value = str(raw["name"]), str(raw["value"])
    elif isinstance(raw, str):
        name, sep, quoted = raw.partition(":")
        if not sep or len(quoted) < 2 or quoted[0] != "'" or quoted[-1] != "'":
            raise ValidationError(
                f"Facet string must look like name:'value': {raw!r}",
                errors=[{"field": "facets", "error": "malformed facet"}],
            )
        value = quoted[1:-1]
    else:
        raise ValidationError(
            f"Unsupported facet {raw!r}",
            errors=[{"field": "facets", "error": "malformed facet"}],
        )

    facet_cls = _FACET_TYPES.get(name)
    if facet_cls is None:
        return CustomFacet(value, custom_name=name)
    return facet_cls(value)


def facets(*groups: Iterable[SearchFacet]) -> SearchFilters[SearchFacet]:
    """Shorthand: ``facets([category("fabric")], [version("1.20.1"), version("1.20.2")])``."""
    return SearchFilters(groups)


__all__ = ["SearchIndex", "SearchParameters", "facets"]
