"""Pagination controls for the product list."""

import streamlit as st

from src.browser import PaginationView


def render_pagination(view: PaginationView, key: str = "pagination") -> None:
    """
    Render the range text and Previous/Next controls.

    Renders only a notice when there are no items, and nothing at all when
    every result fits on one page.

    Args:
        view: Pagination facts for the current page.
        key: Unique key prefix for the buttons.
    """
    if view.show_empty_notice:
        st.caption(view.get_empty_message())
        return

    if not view.show_controls:
        return

    info_col, nav_col = st.columns([2, 2])

    with info_col:
        st.caption(view.get_display_range())

    with nav_col:
        prev_col, page_col, next_col = st.columns([1, 1, 1])

        with prev_col:
            st.button(
                "◀ Previous",
                key=f"{key}_prev",
                disabled=not view.can_go_previous,
                on_click=view.request_page,
                args=(-1,),
            )

        with page_col:
            st.markdown(
                f"<div style='text-align: center; padding-top: 8px;'>"
                f"{view.get_page_indicator()}</div>",
                unsafe_allow_html=True,
            )

        with next_col:
            st.button(
                "Next ▶",
                key=f"{key}_next",
                disabled=not view.can_go_next,
                on_click=view.request_page,
                args=(1,),
            )
