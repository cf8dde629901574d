"""Catalog browser core: filter state, URL persistence, controller, pagination.

Usage:
    from src.browser import FilterStateController, InMemoryQueryParams
    from src.catalog import CatalogClient

    controller = FilterStateController(
        CatalogClient(), InMemoryQueryParams.from_query_string("?category=Garden")
    )
    await controller.initialize()
    await controller.set_search("hose")
    print(controller.url, controller.pagination().get_display_range())
"""

from .filter_state import FilterState, first_param_value
from .query_params import (
    QueryParamsAccessor,
    InMemoryQueryParams,
    StreamlitQueryParams,
    parse_query_string,
)
from .pagination import PaginationView
from .controller import FilterStateController


__all__ = [
    # State
    "FilterState",
    "first_param_value",
    # URL access
    "QueryParamsAccessor",
    "InMemoryQueryParams",
    "StreamlitQueryParams",
    "parse_query_string",
    # Pagination
    "PaginationView",
    # Controller
    "FilterStateController",
]
