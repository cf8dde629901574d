"""Filter state controller for the catalog browser.

Owns the FilterState, mirrors it into the URL on every change, and drives
the three dependent loads: category index, subcategory index and the
current product page.

Cascading resets are applied synchronously inside each operation, before
the first await:

    set_search       -> page = 1
    set_category     -> sub_category cleared, page = 1, subcategories reloaded
    set_sub_category -> page = 1
    clear_all        -> everything but page size back to defaults

Responses can resolve in any order. Product and subcategory loads carry a
monotonically increasing request number, and a response is applied only if
no newer request of the same kind was issued in the meantime, so the
rendered page always matches the most recently requested state.

Usage:
    controller = FilterStateController(CatalogClient(), InMemoryQueryParams())
    await controller.initialize()
    await controller.set_category("Electronics")
    view = controller.pagination()
"""

import asyncio
from typing import Any, Callable, List, Mapping, Optional

from config import config
from config.logging_config import get_logger
from src.catalog.client import CatalogAPIError, CatalogClient
from src.catalog.models import Product, ProductPage

from .filter_state import FilterState, first_param_value
from .pagination import PaginationView
from .query_params import QueryParamsAccessor

logger = get_logger("browser.controller")


class FilterStateController:
    """Single owner of the catalog browser's filter and pagination state."""

    def __init__(
        self,
        client: CatalogClient,
        query_params: QueryParamsAccessor,
        on_change: Optional[Callable[["FilterStateController"], None]] = None,
        item_name: Optional[str] = None,
    ):
        """
        Initialize the controller.

        Args:
            client: Catalog API client (anything with the same coroutines).
            query_params: Read/write accessor for the page's URL query.
            on_change: Called after every applied state or data change.
            item_name: Noun used in pagination text.
        """
        self.client = client
        self.query_params = query_params
        self.on_change = on_change
        self.item_name = item_name or config.browser.item_name

        self.state = FilterState()
        self.categories: List[str] = []
        self.sub_categories: List[str] = []
        self.products: List[Product] = []
        self.total_count = 0
        self.loading = False

        self._product_request_id = 0
        self._subcategory_request_id = 0

    # =========================================================================
    # Derived values
    # =========================================================================

    @property
    def url(self) -> str:
        """Canonical relative URL of the current state."""
        return self.state.to_url()

    @property
    def has_active_filters(self) -> bool:
        return self.state.has_active_filters

    def pagination(
        self,
        on_page_change: Optional[Callable[[int], None]] = None,
    ) -> PaginationView:
        """Build the pagination view for the current page of results."""
        return PaginationView(
            current_page=self.state.page,
            items_per_page=self.state.page_size,
            total_items=self.total_count,
            items_on_current_page=len(self.products),
            loading=self.loading,
            on_page_change=on_page_change,
            item_name=self.item_name,
        )

    # =========================================================================
    # Operations
    # =========================================================================

    async def initialize(self, query: Optional[Mapping[str, Any]] = None) -> None:
        """
        Decode the URL into filter state and run the initial loads.

        A non-canonical incoming URL (defaults spelled out, bad numbers,
        orphan subcategory) is rewritten to its canonical form.

        Args:
            query: Query parameters to decode; read from the accessor if None.
        """
        if query is None:
            query = self.query_params.to_dict()

        self.state = FilterState.from_url_params(query)
        logger.debug(f"Initialized from URL: {self.state.get_summary()}")

        incoming = {k: first_param_value(v) for k, v in query.items()}
        if incoming != self.state.to_url_params():
            self._write_url()

        loads = [self.load_categories(), self.refresh_products()]
        if self.state.category:
            loads.append(self.load_sub_categories())
        await asyncio.gather(*loads)

    async def set_search(self, text: Optional[str]) -> None:
        """Set the free-text search and return to page 1."""
        self._apply(
            FilterState(
                search=text or "",
                category=self.state.category,
                sub_category=self.state.sub_category,
                page=1,
                page_size=self.state.page_size,
            )
        )
        await self.refresh_products()

    async def set_category(self, name: Optional[str]) -> None:
        """Select a category (None for all), clearing the subcategory."""
        self._apply(
            FilterState(
                search=self.state.search,
                category=name or None,
                sub_category=None,
                page=1,
                page_size=self.state.page_size,
            )
        )
        await asyncio.gather(self.load_sub_categories(), self.refresh_products())

    async def set_sub_category(self, name: Optional[str]) -> None:
        """
        Select a subcategory (None for all) within the current category.

        Raises:
            ValueError: If a subcategory is given while no category is selected.
        """
        if name and self.state.category is None:
            raise ValueError(f"Cannot select subcategory '{name}' without a category")

        self._apply(
            FilterState(
                search=self.state.search,
                category=self.state.category,
                sub_category=name or None,
                page=1,
                page_size=self.state.page_size,
            )
        )
        await self.refresh_products()

    async def set_page(self, page: int) -> None:
        """
        Move to another page, keeping every filter.

        The upper bound is the caller's responsibility; PaginationView only
        forwards in-range requests.

        Raises:
            ValueError: If page is below 1.
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")

        new_state = self.state.copy()
        new_state.page = page
        self._apply(new_state)
        await self.refresh_products()

    async def clear_all(self) -> None:
        """Drop search, category and subcategory and return to page 1."""
        self._apply(FilterState(page_size=self.state.page_size))
        await asyncio.gather(self.load_sub_categories(), self.refresh_products())

    # =========================================================================
    # Loads
    # =========================================================================

    async def load_categories(self) -> List[str]:
        """
        Load the category index and drop a selection it does not contain.

        A failed load leaves the selection alone: an index that never
        arrived says nothing about whether the selection is stale.
        """
        try:
            categories = await self.client.get_categories()
        except CatalogAPIError as e:
            logger.warning(f"Failed to load categories: {e}")
            self.categories = []
            self._notify()
            return self.categories

        self.categories = list(categories)

        selected = self.state.category
        if selected and selected not in self.categories:
            logger.info(f"Category '{selected}' is not in the catalog; clearing selection")
            await self.set_category(None)
        else:
            self._notify()

        return self.categories

    async def load_sub_categories(self) -> List[str]:
        """Load the subcategory index for the selected category."""
        self._subcategory_request_id += 1
        request_id = self._subcategory_request_id
        category = self.state.category

        if category is None:
            self.sub_categories = []
            return self.sub_categories

        try:
            sub_categories = await self.client.get_subcategories(category)
        except CatalogAPIError as e:
            if request_id != self._subcategory_request_id:
                return self.sub_categories
            logger.warning(f"Failed to load subcategories for '{category}': {e}")
            self.sub_categories = []
            self._notify()
            return self.sub_categories

        if request_id != self._subcategory_request_id:
            logger.debug(f"Discarding stale subcategories for '{category}'")
            return self.sub_categories

        self.sub_categories = list(sub_categories)

        selected = self.state.sub_category
        if selected and selected not in self.sub_categories:
            logger.info(
                f"Subcategory '{selected}' is not in category '{category}'; clearing selection"
            )
            await self.set_sub_category(None)
        else:
            self._notify()

        return self.sub_categories

    async def refresh_products(self) -> bool:
        """
        Fetch the product page for the current state.

        Returns:
            True if this response was applied, False if a newer request
            superseded it.
        """
        self._product_request_id += 1
        request_id = self._product_request_id
        state = self.state.copy()

        self.loading = True
        self._notify()
        logger.debug(f"Product request #{request_id}: {state.to_product_query()}")

        try:
            page = await self.client.get_products(
                search=state.search,
                category=state.category,
                sub_category=state.sub_category,
                limit=state.page_size,
                offset=state.offset,
            )
        except CatalogAPIError as e:
            if request_id == self._product_request_id:
                logger.warning(f"Failed to load products: {e}")
            page = ProductPage.empty()

        if request_id != self._product_request_id:
            logger.debug(
                f"Discarding product response #{request_id}; "
                f"latest is #{self._product_request_id}"
            )
            return False

        self.products = list(page.products)
        self.total_count = page.total
        self.loading = False
        self._notify()
        return True

    # =========================================================================
    # Internals
    # =========================================================================

    def _apply(self, new_state: FilterState) -> None:
        self.state = new_state
        self._write_url()
        self._notify()

    def _write_url(self) -> None:
        params = self.state.to_url_params()
        logger.debug(f"URL -> {self.url}")
        self.query_params.replace(params)

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self)
