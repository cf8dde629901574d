"""Configuration module for the StackShop catalog browser."""

from .settings import config, CatalogAPIConfig, BrowserConfig, AppConfig, Config
from .constants import (
    # URL parameters
    PARAM_SEARCH,
    PARAM_CATEGORY,
    PARAM_SUBCATEGORY,
    PARAM_PAGE,
    PARAM_LIMIT,
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    # Catalog API
    CATEGORIES_PATH,
    SUBCATEGORIES_PATH,
    PRODUCTS_PATH,
    PRODUCT_DETAIL_PATH,
    # UI text
    ALL_CATEGORIES_LABEL,
    ALL_SUBCATEGORIES_LABEL,
    SEARCH_PLACEHOLDER,
    LOADING_MESSAGE,
    EMPTY_MESSAGE_TEMPLATE,
)

__all__ = [
    "config",
    "CatalogAPIConfig",
    "BrowserConfig",
    "AppConfig",
    "Config",
    "PARAM_SEARCH",
    "PARAM_CATEGORY",
    "PARAM_SUBCATEGORY",
    "PARAM_PAGE",
    "PARAM_LIMIT",
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "CATEGORIES_PATH",
    "SUBCATEGORIES_PATH",
    "PRODUCTS_PATH",
    "PRODUCT_DETAIL_PATH",
    "ALL_CATEGORIES_LABEL",
    "ALL_SUBCATEGORIES_LABEL",
    "SEARCH_PLACEHOLDER",
    "LOADING_MESSAGE",
    "EMPTY_MESSAGE_TEMPLATE",
]
