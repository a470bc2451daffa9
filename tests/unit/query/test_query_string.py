"""Unit tests for query-string encoding."""

from __future__ import annotations

from urllib.parse import parse_qsl

import pytest

from modrinth_client.query import (
    SearchFacet,
    SearchFilters,
    SearchIndex,
    SearchParameters,
    encode_value,
    facets,
    query_pairs,
    to_query_string,
)


class TestToQueryString:
    def test_absent_fields_omitted(self) -> None:
        assert to_query_string(SearchParameters()) == ""
        assert to_query_string(SearchParameters(query="sodium")) == "query=sodium"

    def test_facets_percent_encoded_json(self) -> None:
        params = SearchParameters(facets=facets([SearchFacet.category("fabric")]))
        assert to_query_string(params) == "facets=%5B%5B%22categories%3A%27fabric%27%22%5D%5D"

    def test_fields_in_declaration_order(self) -> None:
        params = SearchParameters(
            limit=10, offset=20, index=SearchIndex.NEWEST, query="x"
        )
        assert to_query_string(params) == "query=x&index=newest&offset=20&limit=10"

    def test_space_encoded_as_plus(self) -> None:
        assert to_query_string(SearchParameters(query="ender chest")) == "query=ender+chest"

    def test_zero_is_present(self) -> None:
        assert to_query_string(SearchParameters(offset=0)) == "offset=0"

    def test_empty_expression_is_still_sent(self) -> None:
        assert to_query_string(SearchParameters(facets=SearchFilters([]))) == "facets=%5B%5D"

    def test_deterministic(self) -> None:
        params = SearchParameters(
            query="a&b=c",
            facets=facets(
                [SearchFacet.category("fabric")],
                [SearchFacet.version("1.20.1"), SearchFacet.version("1.20.2")],
            ),
            index=SearchIndex.DOWNLOADS,
            filters=SearchFilters([["downloads > 100"]]),
        )
        assert to_query_string(params) == to_query_string(params)

    def test_decodes_back_to_json(self) -> None:
        expr = facets(
            [SearchFacet.category("fabric")],
            [SearchFacet.version("1.20.1"), SearchFacet.version("1.20.2")],
        )
        params = SearchParameters(query="a&b", facets=expr, filters=SearchFilters([["x > 1"]]))
        decoded = dict(parse_qsl(to_query_string(params)))
        assert decoded == {
            "query": "a&b",
            "facets": expr.to_json(),
            "filters": '[["x > 1"]]',
        }

    def test_rejects_non_dataclass(self) -> None:
        with pytest.raises(TypeError):
            to_query_string({"query": "x"})


class TestEncodeValue:
    def test_enum(self) -> None:
        assert encode_value(SearchIndex.FOLLOWS) == "follows"

    def test_integer_as_decimal(self) -> None:
        assert encode_value(20) == "20"

    def test_filters_as_compact_json(self) -> None:
        assert encode_value(SearchFilters([["x > 1"], ["y"]])) == '[["x > 1"],["y"]]'


class TestQueryPairs:
    def test_unencoded_pairs_in_order(self) -> None:
        params = SearchParameters(query="a b", index=SearchIndex.UPDATED, limit=5)
        assert query_pairs(params) == [("query", "a b"), ("index", "updated"), ("limit", "5")]
