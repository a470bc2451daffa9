"""Query-string encoding of structured request parameters."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from modrinth_client.query.facets import SearchFilters


def encode_value(value: Any) -> str:
    """Render one parameter value in the service's query dialect.

    :class:`SearchFilters` become compact JSON array-of-arrays, enums their
    wire token. Everything else is rendered with ``str``.
    """
    if isinstance(value, SearchFilters):
        return value.to_json()
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def query_pairs(params: Any) -> list[tuple[str, str]]:
    """Return ``(key, value)`` pairs for every provided field, in declaration order."""
    if not dataclasses.is_dataclass(params) or isinstance(params, type):
        raise TypeError(f"Expected a parameters dataclass instance, got {type(params).__name__}")
    return [
        (field.name, encode_value(value))
        for field in dataclasses.fields(params)
        if (value := getattr(params, field.name)) is not None
    ]


def to_query_string(params: Any) -> str:
    """Encode a parameters dataclass as an ``application/x-www-form-urlencoded`` string.

    Absent (``None``) fields are omitted. Output is deterministic for equal inputs.
    """
    return urlencode(query_pairs(params))


__all__ = ["encode_value", "query_pairs", "to_query_string"]
