"""Async HTTP client for the catalog API.

Wraps the three read-only endpoints the browser depends on:

    GET /categories                      -> {"categories": [...]}
    GET /subcategories?category=<name>   -> {"subCategories": [...]}
    GET /products?search=&category=&subCategory=&limit=&offset=
                                         -> {"products": [...], "total": N}

Every failure (transport, HTTP status, JSON decoding, schema validation)
is raised as CatalogAPIError so callers have a single exception to handle.
"""

from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from config import config
from config.constants import (
    CATEGORIES_PATH,
    SUBCATEGORIES_PATH,
    PRODUCTS_PATH,
    API_PARAM_SEARCH,
    API_PARAM_CATEGORY,
    API_PARAM_SUBCATEGORY,
    API_PARAM_LIMIT,
    API_PARAM_OFFSET,
)
from config.logging_config import get_logger

from .models import CategoryIndex, ProductPage, SubCategoryIndex

logger = get_logger("catalog.client")


def build_product_query(
    search: Optional[str] = None,
    category: Optional[str] = None,
    sub_category: Optional[str] = None,
    limit: int = 20,
    offset: int = 0,
) -> Dict[str, Any]:
    """Build the query parameters for GET products, omitting unset filters."""
    params: Dict[str, Any] = {}
    if search:
        params[API_PARAM_SEARCH] = search
    if category:
        params[API_PARAM_CATEGORY] = category
    if sub_category:
        params[API_PARAM_SUBCATEGORY] = sub_category
    params[API_PARAM_LIMIT] = limit
    params[API_PARAM_OFFSET] = offset
    return params


class CatalogAPIError(Exception):
    """Raised when a catalog API request fails or returns unusable data."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        path: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.path = path

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"path={self.path}")
        if self.status_code is not None:
            parts.append(f"status={self.status_code}")
        return " ".join(parts)


class CatalogClient:
    """Client for the catalog API.

    Usage:
        async with CatalogClient() as client:
            categories = await client.get_categories()
            page = await client.get_products(category="Electronics", limit=20, offset=0)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the catalog client.

        Args:
            base_url: API base URL (defaults to CATALOG_API_BASE_URL).
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, used by tests to stub the API.
        """
        self.base_url = (base_url or config.api.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.api.timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._request_count = 0

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @property
    def request_count(self) -> int:
        return self._request_count

    async def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Issue a GET request and decode the JSON body.

        Args:
            path: Endpoint path relative to the base URL.
            params: Query parameters; None values are dropped.

        Returns:
            Decoded JSON payload.
        """
        client = await self._get_client()

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        logger.debug(f"GET {path} params={params}")
        self._request_count += 1

        try:
            response = await client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CatalogAPIError(
                "Catalog API returned an error status",
                status_code=e.response.status_code,
                path=path,
            ) from e
        except httpx.HTTPError as e:
            raise CatalogAPIError(f"Catalog API request failed: {e}", path=path) from e

        try:
            return response.json()
        except ValueError as e:
            raise CatalogAPIError(
                "Catalog API returned invalid JSON",
                status_code=response.status_code,
                path=path,
            ) from e

    async def get_categories(self) -> List[str]:
        """Fetch the ordered list of category names."""
        data = await self._get_json(CATEGORIES_PATH)
        try:
            return CategoryIndex.model_validate(data).categories
        except ValidationError as e:
            raise CatalogAPIError(f"Unexpected categories payload: {e}", path=CATEGORIES_PATH) from e

    async def get_subcategories(self, category: str) -> List[str]:
        """
        Fetch the subcategory names valid for a category.

        Args:
            category: Selected category name.

        Returns:
            Ordered list of subcategory names.
        """
        data = await self._get_json(SUBCATEGORIES_PATH, params={"category": category})
        try:
            return SubCategoryIndex.model_validate(data).sub_categories
        except ValidationError as e:
            raise CatalogAPIError(
                f"Unexpected subcategories payload: {e}", path=SUBCATEGORIES_PATH
            ) from e

    async def get_products(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        sub_category: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> ProductPage:
        """
        Fetch one page of products.

        Args:
            search: Free-text filter (omitted when empty).
            category: Category filter.
            sub_category: Subcategory filter.
            limit: Page size.
            offset: Number of matching products to skip.

        Returns:
            ProductPage with the page's products and the total match count.
        """
        params = build_product_query(search, category, sub_category, limit, offset)
        data = await self._get_json(PRODUCTS_PATH, params=params)
        try:
            return ProductPage.model_validate(data)
        except ValidationError as e:
            raise CatalogAPIError(f"Unexpected products payload: {e}", path=PRODUCTS_PATH) from e
