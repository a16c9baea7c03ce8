"""Navigation rules shared by pagination renderers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from pagination_showcase.services.page_range import PageRangeResult
from pagination_showcase.services.validation_service import PaginationRequest
from pagination_showcase.utils.helpers import coerce_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationState:
    """Targets and enablement of the previous/next/first/last controls."""

    previous_page: int
    next_page: int
    first_page: int
    last_page: int
    can_go_previous: bool
    can_go_next: bool
    show_first_last: bool


def resolve_page_change(target_page: object, current_page: int, total_pages: int) -> Optional[int]:
    """Return the page to navigate to, or None when the request is a no-op.

    Requests for the current page or for a page outside ``[1, total_pages]``
    are ignored.
    """
    page = coerce_int(target_page)
    if page is None or page < 1 or page > total_pages:
        logger.debug("Ignoring navigation to %r outside 1..%d", target_page, total_pages)
        return None
    if page == current_page:
        return None
    return page


def navigation_state(
    request: PaginationRequest,
    page_range: PageRangeResult,
    show_first_last: bool = False,
) -> NavigationState:
    """Build the jump-control state for a computed page range."""
    has_pages = request.total_pages > 0
    return NavigationState(
        previous_page=request.current_page - 1,
        next_page=request.current_page + 1,
        first_page=1,
        last_page=request.total_pages,
        can_go_previous=has_pages and not page_range.is_first_page,
        can_go_next=has_pages and not page_range.is_last_page,
        show_first_last=bool(show_first_last),
    )
