"""Reusable UI components for the StackShop catalog browser."""

from .filter_bar import render_filter_bar
from .pagination import render_pagination
from .product_grid import render_product_card, render_product_grid

__all__ = [
    "render_filter_bar",
    "render_pagination",
    "render_product_card",
    "render_product_grid",
]
