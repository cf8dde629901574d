"""Search, category and subcategory filter bar for the catalog browser."""

from typing import Any, List, Optional

import streamlit as st

from config.constants import (
    ALL_CATEGORIES_LABEL,
    ALL_SUBCATEGORIES_LABEL,
    SEARCH_PLACEHOLDER,
)
from src.browser import FilterStateController

from app.session import run_async

# Widget keys
SEARCH_KEY = "filter_search"
CATEGORY_KEY = "filter_category"
SUBCATEGORY_KEY = "filter_subcategory"


def _sync_widget(key: str, value: Any) -> None:
    """Push controller state into a widget before it is drawn."""
    if st.session_state.get(key) != value:
        st.session_state[key] = value


def _select_options(names: List[str], selected: Optional[str]) -> List[str]:
    """Options for a selectbox: "" (all) first, then the index."""
    options = [""] + list(names)
    # Keep a selection visible while its index is still loading or failed
    if selected and selected not in names:
        options.append(selected)
    return options


def render_filter_bar(controller: FilterStateController) -> None:
    """
    Render the filter row and route changes to the controller.

    Args:
        controller: Session controller owning the filter state.
    """
    state = controller.state

    def on_search_change() -> None:
        run_async(controller.set_search(st.session_state[SEARCH_KEY]))

    def on_category_change() -> None:
        run_async(controller.set_category(st.session_state[CATEGORY_KEY] or None))

    def on_subcategory_change() -> None:
        run_async(controller.set_sub_category(st.session_state[SUBCATEGORY_KEY] or None))

    def on_clear() -> None:
        run_async(controller.clear_all())

    show_subcategories = bool(state.category and controller.sub_categories)
    cols = st.columns([3, 2, 2, 1] if show_subcategories else [3, 2, 1])

    with cols[0]:
        _sync_widget(SEARCH_KEY, state.search)
        st.text_input(
            "Search",
            key=SEARCH_KEY,
            placeholder=SEARCH_PLACEHOLDER,
            label_visibility="collapsed",
            on_change=on_search_change,
        )

    with cols[1]:
        _sync_widget(CATEGORY_KEY, state.category or "")
        st.selectbox(
            "Category",
            options=_select_options(controller.categories, state.category),
            format_func=lambda name: name or ALL_CATEGORIES_LABEL,
            key=CATEGORY_KEY,
            label_visibility="collapsed",
            on_change=on_category_change,
        )

    if show_subcategories:
        with cols[2]:
            _sync_widget(SUBCATEGORY_KEY, state.sub_category or "")
            st.selectbox(
                "Subcategory",
                options=_select_options(controller.sub_categories, state.sub_category),
                format_func=lambda name: name or ALL_SUBCATEGORIES_LABEL,
                key=SUBCATEGORY_KEY,
                label_visibility="collapsed",
                on_change=on_subcategory_change,
            )

    if controller.has_active_filters:
        with cols[-1]:
            st.button("Clear Filters", key="filter_clear", on_click=on_clear)
