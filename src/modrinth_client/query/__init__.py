"""Query – search facets, parameters and query-string encoding."""
from modrinth_client.query.facets import (
    CategoryFacet,
    CustomFacet,
    FacetExpression,
    LicenseFacet,
    ProjectTypeFacet,
    SearchFacet,
    SearchFilters,
    VersionFacet,
)
from modrinth_client.query.params import SearchIndex, SearchParameters, facets
from modrinth_client.query.query_string import encode_value, query_pairs, to_query_string

__all__ = [
    "CategoryFacet",
    "CustomFacet",
    "FacetExpression",
    "LicenseFacet",
    "ProjectTypeFacet",
    "SearchFacet",
    "SearchFilters",
    "SearchIndex",
    "SearchParameters",
    "VersionFacet",
    "encode_value",
    "facets",
    "query_pairs",
    "to_query_string",
]
