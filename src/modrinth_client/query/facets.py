"""Search facets and the AND-of-OR filter expression.

The service evaluates facets as a JSON array of arrays: members of an inner
array are ORed, inner arrays are ANDed::

    [["categories:'fabric'"], ["versions:'1.20.1'", "versions:'1.20.2'"]]
"""

from __future__ import annotations

import dataclasses
import json
from typing import ClassVar, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


@dataclasses.dataclass(frozen=True, slots=True)
class SearchFacet:
    """One facet constraint, rendered as ``name:'value'``."""

    name: ClassVar[str] = ""

    value: str

    @property
    def key(self) -> str:
        return self.name

    def __str__(self) -> str:
        return f"{self.key}:'{self.value}'"

    @staticmethod
    def category(value: str) -> "CategoryFacet":
        return CategoryFacet(value)

    @staticmethod
    def version(value: str) -> "VersionFacet":
        return VersionFacet(value)

    @staticmethod
    def license(value: str) -> "LicenseFacet":
        return LicenseFacet(value)

    @staticmethod
    def project_type(value: str) -> "ProjectTypeFacet":
        return ProjectTypeFacet(value)

    @staticmethod
    def custom(name: str, value: str) -> "CustomFacet":
        return CustomFacet(value, custom_name=name)


@dataclasses.dataclass(frozen=True, slots=True)
class CategoryFacet(SearchFacet):
    name: ClassVar[str] = "categories"


@dataclasses.dataclass(frozen=True, slots=True)
class VersionFacet(SearchFacet):
    name: ClassVar[str] = "versions"


@dataclasses.dataclass(frozen=True, slots=True)
class LicenseFacet(SearchFacet):
    name: ClassVar[str] = "license"


@dataclasses.dataclass(frozen=True, slots=True)
class ProjectTypeFacet(SearchFacet):
    name: ClassVar[str] = "project_type"


@dataclasses.dataclass(frozen=True, slots=True)
class CustomFacet(SearchFacet):
    """Facet on any field the service indexes (e.g. ``downloads``, ``author``)."""

    custom_name: str = ""

    def __post_init__(self) -> None:
        if not self.custom_name:
            raise ValueError("CustomFacet requires a non-empty name")

    @property
    def key(self) -> str:
        return self.custom_name


class SearchFilters(Generic[T]):
    """Ordered AND of OR-groups.

    ``T`` is :class:`SearchFacet` for typed facets or ``str`` for the raw
    ``filters`` expression. Each member is rendered with ``str()``.
    """

    __slots__ = ("_groups",)

    def __init__(self, groups: Iterable[Iterable[T]] = ()) -> None:
        if isinstance(groups, (str, bytes)):
            raise TypeError("SearchFilters expects an iterable of groups, not a string")
        normalised: list[tuple[T, ...]] = []
        for group in groups:
            if isinstance(group, (str, bytes)):
                raise TypeError("Each filter group must be an iterable of members, not a string")
            normalised.append(tuple(group))
        self._groups: tuple[tuple[T, ...], ...] = tuple(normalised)

    @property
    def groups(self) -> tuple[tuple[T, ...], ...]:
        return self._groups

    def and_(self, *members: T) -> "SearchFilters[T]":
        """Return a copy with one more OR-group appended."""
        return SearchFilters([*self._groups, members])

    def to_list(self) -> list[list[str]]:
        return [[str(member) for member in group] for group in self._groups]

    def to_json(self) -> str:
        """Compact JSON array-of-arrays, as the service expects it."""
        return json.dumps(self.to_list(), separators=(",", ":"), ensure_ascii=False)

    def __iter__(self) -> Iterator[tuple[T, ...]]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchFilters):
            return NotImplemented
        return self._groups == other._groups

    def __hash__(self) -> int:
        return hash(self._groups)

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"SearchFilters({self.to_list()!r})"


FacetExpression = SearchFilters[SearchFacet]

__all__ = [
    "CategoryFacet",
    "CustomFacet",
    "FacetExpression",
    "LicenseFacet",
    "ProjectTypeFacet",
    "SearchFacet",
    "SearchFilters",
    "VersionFacet",
]
