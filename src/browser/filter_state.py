"""Filter state for the catalog browser.

FilterState is the single source of truth for what the product list shows:
free-text search, category, subcategory, page and page size. The page URL
is its only persistence layer, so the state encodes to and decodes from
query parameters. Encoding is canonical: a parameter equal to its default
is omitted, which keeps shareable URLs minimal and stable.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

from config.constants import (
    PARAM_SEARCH,
    PARAM_CATEGORY,
    PARAM_SUBCATEGORY,
    PARAM_PAGE,
    PARAM_LIMIT,
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
)
from src.catalog.client import build_product_query


def first_param_value(value: Any) -> Optional[str]:
    """Query parameter values may arrive as lists; the first one wins."""
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return None
    return str(value)


def _parse_positive_int(value: Any, default: int) -> int:
    """Parse a query parameter as an integer >= 1, falling back to default."""
    raw = first_param_value(value)
    if raw is None:
        return default
    try:
        parsed = int(raw.strip())
    except ValueError:
        return default
    return parsed if parsed >= 1 else default


@dataclass
class FilterState:
    """Current filter and pagination state of the catalog browser."""

    search: str = ""
    category: Optional[str] = None
    sub_category: Optional[str] = None
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        # "" and None both mean "no selection"
        self.search = self.search or ""
        self.category = self.category or None
        self.sub_category = self.sub_category or None

        if self.sub_category is not None and self.category is None:
            raise ValueError("sub_category requires a category")
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")

    @property
    def offset(self) -> int:
        """Number of products before the current page."""
        return (self.page - 1) * self.page_size

    @property
    def has_active_filters(self) -> bool:
        """True when search, category or subcategory narrows the results."""
        return bool(self.search or self.category or self.sub_category)

    def copy(self) -> "FilterState":
        """Create a copy of this filter state."""
        return FilterState(
            search=self.search,
            category=self.category,
            sub_category=self.sub_category,
            page=self.page,
            page_size=self.page_size,
        )

    def get_summary(self) -> str:
        """Get a human-readable summary of active filters."""
        parts = []

        if self.search:
            parts.append(f'Search: "{self.search}"')
        if self.category:
            if self.sub_category:
                parts.append(f"Category: {self.category} / {self.sub_category}")
            else:
                parts.append(f"Category: {self.category}")
        if self.page > 1:
            parts.append(f"Page {self.page}")

        return " | ".join(parts) if parts else "All products (no filters)"

    def to_url_params(self) -> Dict[str, str]:
        """
        Convert filter state to canonical URL parameters.

        Returns:
            Dict of parameter name to string value, defaults omitted.
        """
        params = {}

        if self.search:
            params[PARAM_SEARCH] = self.search
        if self.category:
            params[PARAM_CATEGORY] = self.category
        if self.sub_category:
            params[PARAM_SUBCATEGORY] = self.sub_category
        if self.page != DEFAULT_PAGE:
            params[PARAM_PAGE] = str(self.page)
        if self.page_size != DEFAULT_PAGE_SIZE:
            params[PARAM_LIMIT] = str(self.page_size)

        return params

    @classmethod
    def from_url_params(cls, params: Mapping[str, Any]) -> "FilterState":
        """
        Create filter state from URL parameters.

        Missing or unparseable values take their defaults. A page or limit
        below 1 is treated as unparseable, and a subcategory without a
        category is dropped.

        Args:
            params: Mapping of URL parameters (str or list-of-str values).

        Returns:
            FilterState populated from parameters.
        """
        category = first_param_value(params.get(PARAM_CATEGORY)) or None
        sub_category = first_param_value(params.get(PARAM_SUBCATEGORY)) or None
        if category is None:
            sub_category = None

        return cls(
            search=first_param_value(params.get(PARAM_SEARCH)) or "",
            category=category,
            sub_category=sub_category,
            page=_parse_positive_int(params.get(PARAM_PAGE), DEFAULT_PAGE),
            page_size=_parse_positive_int(params.get(PARAM_LIMIT), DEFAULT_PAGE_SIZE),
        )

    def to_url(self, path: str = "/") -> str:
        """Canonical relative URL for this state, e.g. ``/?category=Garden``."""
        params = self.to_url_params()
        return f"{path}?{urlencode(params)}" if params else path

    def to_product_query(self) -> Dict[str, Any]:
        """Query parameters for the products endpoint."""
        return build_product_query(
            search=self.search,
            category=self.category,
            sub_category=self.sub_category,
            limit=self.page_size,
            offset=self.offset,
        )
