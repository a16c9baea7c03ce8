"""Page-range calculation shared by every pagination skin.

The calculator maps ``(current_page, total_pages, sibling_count)`` to the
ordered tokens a pager renders: literal page numbers and ``ELLIPSIS``
markers standing in for two or more elided pages. It is a pure function;
out-of-range input is clamped rather than rejected so a pager can always
render something.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Tuple, Union

from pagination_showcase.services.validation_service import PaginationRequest, coerce_pagination_request


class PageMarker(str, Enum):
    """Non-numeric page tokens."""

    ELLIPSIS = "ellipsis"


ELLIPSIS = PageMarker.ELLIPSIS

PageToken = Union[int, PageMarker]


def is_ellipsis(token: PageToken) -> bool:
    """Return True when the token is a gap marker rather than a page."""
    return token is ELLIPSIS


@dataclass(frozen=True)
class PageRangeResult:
    """Tokens to render plus the state of the previous/next controls."""

    tokens: Tuple[PageToken, ...]
    is_first_page: bool
    is_last_page: bool

    @property
    def page_numbers(self) -> List[int]:
        return [token for token in self.tokens if not is_ellipsis(token)]

    @property
    def ellipsis_count(self) -> int:
        return sum(1 for token in self.tokens if is_ellipsis(token))


def compute_page_range(current_page: object, total_pages: object, sibling_count: object = 1) -> PageRangeResult:
    """Compute the page tokens for a pagination control.

    Up to ``2 * sibling_count + 5`` pages are listed in full. Longer ranges
    keep the first page, the last page and the current page with its
    siblings, and collapse the remaining runs into ellipsis markers. Near
    either end the visible run is widened to ``2 * sibling_count + 1``
    pages so the control does not jump around when stepping off the edge.
    """
    request = coerce_pagination_request(current_page, total_pages, sibling_count)
    return build_page_range(request)


def build_page_range(request: PaginationRequest) -> PageRangeResult:
    """Compute the page tokens for an already-coerced request."""
    if request.total_pages == 0:
        return PageRangeResult(tokens=(), is_first_page=False, is_last_page=False)

    shown_pages = _shown_pages(request.current_page, request.total_pages, request.sibling_count)
    return PageRangeResult(
        tokens=tuple(_fill_gaps(shown_pages)),
        is_first_page=request.current_page == 1,
        is_last_page=request.current_page == request.total_pages,
    )


def _shown_pages(current_page: int, total_pages: int, sibling_count: int) -> List[int]:
    """Return the sorted page numbers that stay visible."""
    total_number_slots = sibling_count * 2 + 3
    total_blocks = total_number_slots + 2

    if total_pages <= total_blocks:
        return list(range(1, total_pages + 1))

    left_sibling = max(current_page - sibling_count, 1)
    right_sibling = min(current_page + sibling_count, total_pages)
    show_left_ellipsis = left_sibling > 2
    show_right_ellipsis = right_sibling < total_pages - 1
    edge_width = sibling_count * 2 + 1

    if not show_left_ellipsis and show_right_ellipsis:
        visible = range(1, max(edge_width, right_sibling) + 1)
    elif show_left_ellipsis and not show_right_ellipsis:
        visible = range(min(total_pages - edge_width + 1, left_sibling), total_pages + 1)
    else:
        # Both ellipses, or neither when the caller's values disagree.
        visible = range(left_sibling, right_sibling + 1)

    return sorted({1, total_pages, *visible})


def _fill_gaps(pages: Iterable[int]) -> Iterator[PageToken]:
    """Insert ellipsis markers between non-adjacent pages.

    A gap of a single page is rendered as that page.
    """
    previous = 0
    for page in pages:
        gap = page - previous - 1
        if gap == 1:
            yield previous + 1
        elif gap > 1:
            yield ELLIPSIS
        yield page
        previous = page
