"""Constants for the StackShop catalog browser."""

# =============================================================================
# URL query parameters (the browser's persisted filter state)
# =============================================================================

PARAM_SEARCH = "search"
PARAM_CATEGORY = "category"
PARAM_SUBCATEGORY = "subcategory"
PARAM_PAGE = "page"
PARAM_LIMIT = "limit"

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20

# =============================================================================
# Catalog API
# =============================================================================

CATEGORIES_PATH = "/categories"
SUBCATEGORIES_PATH = "/subcategories"
PRODUCTS_PATH = "/products"

# The products endpoint spells subcategory differently from the page URL
API_PARAM_SEARCH = "search"
API_PARAM_CATEGORY = "category"
API_PARAM_SUBCATEGORY = "subCategory"
API_PARAM_LIMIT = "limit"
API_PARAM_OFFSET = "offset"

PRODUCT_DETAIL_PATH = "/product/{sku}"

# =============================================================================
# UI text
# =============================================================================

ALL_CATEGORIES_LABEL = "All Categories"
ALL_SUBCATEGORIES_LABEL = "All Subcategories"
SEARCH_PLACEHOLDER = "Search products..."
LOADING_MESSAGE = "Loading products..."
EMPTY_MESSAGE_TEMPLATE = "No {item_name} found"
