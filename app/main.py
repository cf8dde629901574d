"""
StackShop catalog browser - Main Streamlit Application

Run with: streamlit run app/main.py
"""

import streamlit as st
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config, LOADING_MESSAGE
from config.logging_config import setup_logging

from app.components import render_filter_bar, render_pagination, render_product_grid
from app.session import get_controller, run_async


def main():
    """Main application entry point."""
    st.set_page_config(
        page_title=config.app.name,
        page_icon="🛒",
        layout="wide",
    )
    setup_logging(config.app.log_level)

    controller = get_controller()

    st.title(config.app.name)
    st.caption(f"v{config.app.version}")
    render_filter_bar(controller)

    st.divider()

    if controller.loading:
        st.info(LOADING_MESSAGE)
        return

    view = controller.pagination(
        on_page_change=lambda page: run_async(controller.set_page(page))
    )

    if controller.total_count and not controller.products:
        # Shared URL with a page past the end of the results
        st.markdown(view.get_empty_message())
        st.button(
            f"Go to page {view.total_pages}",
            key="pagination_last",
            on_click=view.on_page_change,
            args=(view.total_pages,),
        )
        return

    # Only the empty notice when nothing matches
    render_pagination(view)
    render_product_grid(controller.products)


if __name__ == "__main__":
    main()
