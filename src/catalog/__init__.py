"""Catalog API collaborators: response models and HTTP client."""

from .models import Product, ProductPage, CategoryIndex, SubCategoryIndex
from .client import CatalogClient, CatalogAPIError, build_product_query

__all__ = [
    "Product",
    "ProductPage",
    "CategoryIndex",
    "SubCategoryIndex",
    "CatalogClient",
    "CatalogAPIError",
    "build_product_query",
]
