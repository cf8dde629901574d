"""Pagination calculator for the product list.

PaginationView is recomputed from counts on every render and never mutates
filter state. Page changes are forwarded to the owner through a callback.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from config.constants import EMPTY_MESSAGE_TEMPLATE
from config.logging_config import get_logger

logger = get_logger("browser.pagination")


@dataclass
class PaginationView:
    """Derived pagination facts for one page of results."""

    current_page: int
    items_per_page: int
    total_items: int
    items_on_current_page: int
    loading: bool = False
    on_page_change: Optional[Callable[[int], None]] = None
    item_name: str = "products"

    @property
    def total_pages(self) -> int:
        """Number of pages; 0 when there are no items."""
        if self.total_items <= 0:
            return 0
        return (self.total_items + self.items_per_page - 1) // self.items_per_page

    @property
    def show_empty_notice(self) -> bool:
        return self.total_items == 0

    @property
    def show_controls(self) -> bool:
        """A single page of results gets no pagination UI at all."""
        return self.total_pages > 1

    @property
    def start_item(self) -> int:
        """1-based index of the first item on the current page."""
        return (self.current_page - 1) * self.items_per_page + 1

    @property
    def end_item(self) -> int:
        """1-based index of the last item on the current page."""
        return min(self.start_item + self.items_on_current_page - 1, self.total_items)

    @property
    def can_go_previous(self) -> bool:
        return self.current_page > 1 and not self.loading

    @property
    def can_go_next(self) -> bool:
        return self.current_page < self.total_pages and not self.loading

    def get_display_range(self) -> str:
        """Get formatted display range string."""
        text = f"Showing {self.start_item}-{self.end_item} of {self.total_items} {self.item_name}"
        if self.current_page > 1:
            text += f" (Page {self.current_page})"
        return text

    def get_page_indicator(self) -> str:
        return f"Page {self.current_page} of {self.total_pages}"

    def get_empty_message(self) -> str:
        return EMPTY_MESSAGE_TEMPLATE.format(item_name=self.item_name)

    def request_page(self, delta: int) -> Optional[int]:
        """
        Request a move of ``delta`` pages from the current one.

        Out-of-range targets, and any request while a load is in flight,
        are rejected as a no-op.

        Args:
            delta: -1 for "Previous", +1 for "Next"; other offsets allowed.

        Returns:
            The requested page number, or None if the request was rejected.
        """
        target = self.current_page + delta

        if self.loading:
            logger.debug(f"Ignoring page request {target}: load in progress")
            return None
        if target < 1 or target > self.total_pages or target == self.current_page:
            logger.debug(
                f"Ignoring page request {target}: current page {self.current_page}, "
                f"valid range 1..{self.total_pages}"
            )
            return None

        if self.on_page_change is not None:
            self.on_page_change(target)
        return target
