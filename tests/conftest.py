"""Pytest configuration and fixtures for the StackShop catalog browser tests."""

import asyncio
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.catalog import CatalogAPIError, Product, ProductPage


CATEGORIES = ["Electronics", "Garden"]

SUB_CATEGORIES = {
    "Electronics": ["Phones", "Laptops"],
    "Garden": ["Hoses", "Tools"],
}


def make_product(index: int, category: str, sub_category: str, title: str) -> Product:
    """Build a product the way the API returns it."""
    return Product.model_validate({
        "stacklineSku": f"SKU{index:04d}",
        "title": title,
        "categoryName": category,
        "subCategoryName": sub_category,
        "imageUrls": [f"https://images.example.com/{index}.jpg"],
    })


def build_catalog() -> List[Product]:
    """45 electronics (30 phones, 15 laptops) and 5 garden products."""
    products = []
    for i in range(30):
        products.append(make_product(i, "Electronics", "Phones", f"Smart Phone {i}"))
    for i in range(30, 45):
        products.append(make_product(i, "Electronics", "Laptops", f"Laptop {i}"))
    for i, title in enumerate(["Garden Hose", "Hose Reel", "Rake", "Shovel", "Pruner"], start=45):
        sub = "Hoses" if "Hose" in title else "Tools"
        products.append(make_product(i, "Garden", sub, title))
    return products


class FakeCatalogClient:
    """
    Scripted stand-in for CatalogClient.

    Filters an in-memory catalog the way the real endpoint would, records
    every call, and can hold individual responses until a test releases
    them so arrival order can be controlled.
    """

    def __init__(
        self,
        categories: Optional[List[str]] = None,
        sub_categories: Optional[Dict[str, List[str]]] = None,
        products: Optional[List[Product]] = None,
    ):
        self.categories = list(CATEGORIES if categories is None else categories)
        self.sub_categories = dict(SUB_CATEGORIES if sub_categories is None else sub_categories)
        self.products = build_catalog() if products is None else products

        self.category_calls = 0
        self.subcategory_calls: List[str] = []
        self.product_calls: List[dict] = []

        self.fail_categories = False
        self.fail_subcategories = False
        self.fail_products = False
        self.closed = False

        self._product_gates: Dict[int, asyncio.Event] = {}
        self._subcategory_gates: Dict[int, asyncio.Event] = {}

    def hold_products(self, call_index: int) -> asyncio.Event:
        """Hold the response to the N-th products call until the event is set."""
        gate = asyncio.Event()
        self._product_gates[call_index] = gate
        return gate

    def hold_subcategories(self, call_index: int) -> asyncio.Event:
        """Hold the response to the N-th subcategories call until the event is set."""
        gate = asyncio.Event()
        self._subcategory_gates[call_index] = gate
        return gate

    async def get_categories(self) -> List[str]:
        self.category_calls += 1
        if self.fail_categories:
            raise CatalogAPIError("categories unavailable", status_code=503)
        return list(self.categories)

    async def get_subcategories(self, category: str) -> List[str]:
        index = len(self.subcategory_calls)
        self.subcategory_calls.append(category)

        gate = self._subcategory_gates.get(index)
        if gate is not None:
            await gate.wait()

        if self.fail_subcategories:
            raise CatalogAPIError("subcategories unavailable", status_code=503)
        return list(self.sub_categories.get(category, []))

    async def get_products(
        self,
        search=None,
        category=None,
        sub_category=None,
        limit=20,
        offset=0,
    ) -> ProductPage:
        index = len(self.product_calls)
        self.product_calls.append({
            "search": search,
            "category": category,
            "sub_category": sub_category,
            "limit": limit,
            "offset": offset,
        })

        gate = self._product_gates.get(index)
        if gate is not None:
            await gate.wait()

        if self.fail_products:
            raise CatalogAPIError("products unavailable", status_code=500)

        matches = [
            p for p in self.products
            if (not search or search.lower() in p.title.lower())
            and (not category or p.category_name == category)
            and (not sub_category or p.sub_category_name == sub_category)
        ]
        return ProductPage(products=matches[offset:offset + limit], total=len(matches))

    async def close(self) -> None:
        self.closed = True

    @property
    def last_product_call(self) -> dict:
        return self.product_calls[-1]


@pytest.fixture
def catalog_client():
    """Fake catalog client over the standard test catalog."""
    return FakeCatalogClient()


@pytest.fixture
def query_params():
    """Empty in-memory URL."""
    from src.browser import InMemoryQueryParams

    return InMemoryQueryParams()


@pytest.fixture
def controller(catalog_client, query_params):
    """Controller wired to the fake client and in-memory URL (not yet initialized)."""
    from src.browser import FilterStateController

    return FilterStateController(catalog_client, query_params)


@pytest.fixture
def sample_product_payload():
    """One product as the products endpoint serializes it."""
    return {
        "stacklineSku": "E9A4C1",
        "title": "Wireless Earbuds",
        "categoryName": "Electronics",
        "subCategoryName": "Headphones",
        "imageUrls": ["https://images.example.com/earbuds.jpg"],
    }
