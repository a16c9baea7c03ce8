"""Validation logic for pagination parameters."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pagination_showcase.utils.helpers import coerce_int
from pagination_showcase.utils.pagination import clamp_page_number

logger = logging.getLogger(__name__)

SIBLING_COUNT_FALLBACK = 1


@dataclass(frozen=True)
class PaginationRequest:
    """Well-formed pagination parameters.

    ``total_pages`` may be 0 for an empty dataset; otherwise
    ``1 <= current_page <= total_pages``.
    """

    current_page: int
    total_pages: int
    sibling_count: int


def coerce_total_pages(value: object) -> int:
    """Return a non-negative page count; unusable values mean no pages."""
    total_pages = coerce_int(value)
    if total_pages is None:
        logger.debug("Unusable total_pages %r, treating as 0", value)
        return 0
    return max(total_pages, 0)


def coerce_sibling_count(value: object) -> int:
    """Return a non-negative sibling count."""
    sibling_count = coerce_int(value)
    if sibling_count is None:
        logger.debug("Unusable sibling_count %r, using %d", value, SIBLING_COUNT_FALLBACK)
        return SIBLING_COUNT_FALLBACK
    return max(sibling_count, 0)


def coerce_current_page(value: object, total_pages: int) -> int:
    """Return the current page clamped into ``[1, max(total_pages, 1)]``."""
    current_page = coerce_int(value)
    if current_page is None:
        logger.debug("Unusable current_page %r, using 1", value)
        return 1
    clamped = clamp_page_number(current_page, total_pages)
    if clamped != current_page:
        logger.debug("Clamped current_page %d to %d of %d", current_page, clamped, total_pages)
    return clamped


def coerce_pagination_request(
    current_page: object,
    total_pages: object,
    sibling_count: object = SIBLING_COUNT_FALLBACK,
) -> PaginationRequest:
    """Coerce raw caller values into a well-formed request without raising."""
    normalized_total = coerce_total_pages(total_pages)
    return PaginationRequest(
        current_page=coerce_current_page(current_page, normalized_total),
        total_pages=normalized_total,
        sibling_count=coerce_sibling_count(sibling_count),
    )
