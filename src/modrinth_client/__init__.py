"""
modrinth_client – typed client for the Modrinth search API.

Import path convention::

    from modrinth_client import ModrinthClient, SearchParameters, SearchFacet
    from modrinth_client.kernel.errors import TransportError
    from modrinth_client.kernel.types import Base62Id
"""

from modrinth_client.api import SearchPaginator, SearchRequest, get_search, get_search_iter
from modrinth_client.client import ModrinthClient
from modrinth_client.query import SearchFacet, SearchFilters, SearchIndex, SearchParameters, facets

__version__ = "0.1.0"
__all__ = [
    "ModrinthClient",
    "SearchFacet",
    "SearchFilters",
    "SearchIndex",
    "SearchPaginator",
    "SearchParameters",
    "SearchRequest",
    "__version__",
    "facets",
    "get_search",
    "get_search_iter",
]
