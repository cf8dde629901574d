#!/usr/bin/env python
"""
Headless catalog browser for StackShop.

Drives the same filter state controller the Streamlit app uses, starting
from a page URL query string, and prints the resulting canonical URL and
product page. Useful for checking shareable links and the catalog API
without a browser.

Usage:
    python scripts/browse_catalog.py [QUERY] [options]

Examples:
    python scripts/browse_catalog.py "?category=Electronics&page=2"
    python scripts/browse_catalog.py --search phone --category Electronics --json

Options:
    --search TEXT         Apply a search after loading the URL
    --category NAME       Select a category ("" for all)
    --subcategory NAME    Select a subcategory within the category
    --page N              Move to page N
    --json                Output in JSON format
    --base-url URL        Catalog API base URL (default: CATALOG_API_BASE_URL)
    --log-level LEVEL     Logging level (default: LOG_LEVEL)
    --log-file PATH       Also write logs to PATH
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import setup_logging, get_logger
from src.browser import FilterStateController, InMemoryQueryParams
from src.catalog import CatalogClient

logger = get_logger("browse_catalog")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Browse the product catalog from the command line."
    )
    parser.add_argument("query", nargs="?", default="", help="Page URL or query string")
    parser.add_argument("--search", default=None, help="Search text to apply")
    parser.add_argument("--category", default=None, help="Category to select")
    parser.add_argument("--subcategory", default=None, help="Subcategory to select")
    parser.add_argument("--page", type=int, default=None, help="Page to move to")
    parser.add_argument("--json", action="store_true", help="Output in JSON format")
    parser.add_argument("--base-url", default=None, help="Catalog API base URL")
    parser.add_argument("--log-level", default=config.app.log_level, help="Logging level")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file")
    return parser.parse_args(argv)


async def browse(args: argparse.Namespace, client: CatalogClient) -> FilterStateController:
    """
    Load the URL and apply the requested transitions in order.

    Args:
        args: Parsed command-line arguments.
        client: Catalog API client.

    Returns:
        The controller after all transitions have settled.
    """
    controller = FilterStateController(
        client, InMemoryQueryParams.from_query_string(args.query)
    )
    await controller.initialize()

    if args.search is not None:
        await controller.set_search(args.search)
    if args.category is not None:
        await controller.set_category(args.category or None)
    if args.subcategory is not None:
        await controller.set_sub_category(args.subcategory or None)
    if args.page is not None:
        await controller.set_page(args.page)

    return controller


def build_report(controller: FilterStateController) -> Dict[str, Any]:
    """Summarize the controller's current view as plain data."""
    view = controller.pagination()
    return {
        "url": controller.url,
        "filters": controller.state.get_summary(),
        "total": controller.total_count,
        "page": controller.state.page,
        "total_pages": view.total_pages,
        "range": view.get_display_range() if view.show_controls else None,
        "categories": controller.categories,
        "sub_categories": controller.sub_categories,
        "products": [
            product.model_dump(by_alias=True) for product in controller.products
        ],
    }


def print_report(report: Dict[str, Any]) -> None:
    """Print a human-readable report."""
    print(f"URL:     {report['url']}")
    print(f"Filters: {report['filters']}")

    if report["total"] == 0:
        print("No products found")
        return

    if report["range"]:
        print(f"{report['range']}  [Page {report['page']} of {report['total_pages']}]")
    else:
        print(f"{report['total']} products")

    print()
    for product in report["products"]:
        print(f"  {product['stacklineSku']:<14} {product['title']}")
        print(f"  {'':<14} {product['categoryName']} / {product['subCategoryName']}")


async def run(args: argparse.Namespace) -> int:
    async with CatalogClient(base_url=args.base_url) as client:
        try:
            controller = await browse(args, client)
        except ValueError as e:
            logger.error(str(e))
            return 2

    report = build_report(controller)
    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print_report(report)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, log_file=args.log_file)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
