"""API – search, pagination and project lookup."""
from modrinth_client.api.functions import get_search, get_search_iter
from modrinth_client.api.paginator import PaginatorPhase, SearchPaginator
from modrinth_client.api.projects import ProjectRequest
from modrinth_client.api.search import DEFAULT_BASE_URL, SearchRequest

__all__ = [
    "DEFAULT_BASE_URL",
    "PaginatorPhase",
    "ProjectRequest",
    "SearchPaginator",
    "SearchRequest",
    "get_search",
    "get_search_iter",
]
