"""Product card grid for the catalog browser."""

from typing import List

import streamlit as st

from config import config
from src.catalog import Product


def render_product_card(product: Product) -> None:
    """Render one product card: image, title, category badges, details link."""
    with st.container(border=True):
        image_url = product.primary_image_url
        if image_url:
            st.image(image_url, width="stretch")

        st.markdown(f"**{product.title}**")
        st.caption(f"`{product.category_name}` · `{product.sub_category_name}`")
        st.link_button("View Details", product.detail_path, width="stretch")


def render_product_grid(products: List[Product], columns: int = 0) -> None:
    """
    Render products in a fixed-width grid.

    Args:
        products: Products for the current page.
        columns: Cards per row (defaults to CATALOG_GRID_COLUMNS).
    """
    columns = columns or config.browser.grid_columns

    for row_start in range(0, len(products), columns):
        row = products[row_start:row_start + columns]
        cols = st.columns(columns)
        for col, product in zip(cols, row):
            with col:
                render_product_card(product)
