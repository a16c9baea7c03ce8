"""Pagination control component."""

from __future__ import annotations

from typing import List, NamedTuple, Optional

import streamlit as st

from pagination_showcase.config import ELLIPSIS_LABEL, FIRST_LABEL, LAST_LABEL, NEXT_LABEL, PREVIOUS_LABEL
from pagination_showcase.services.navigation_service import navigation_state, resolve_page_change
from pagination_showcase.services.page_range import build_page_range, is_ellipsis
from pagination_showcase.services.validation_service import coerce_pagination_request


class Control(NamedTuple):
    key_suffix: str
    label: str
    target: Optional[int]
    disabled: bool = False
    is_current: bool = False
    help: Optional[str] = None


def build_controls(
    current_page: object,
    total_pages: object,
    sibling_count: object = 1,
    show_first_last: bool = False,
    previous_label: str = PREVIOUS_LABEL,
    next_label: str = NEXT_LABEL,
) -> List[Control]:
    """Lay out the controls of one pager, left to right.

    Ellipsis markers are returned with ``target=None``.
    """
    request = coerce_pagination_request(current_page, total_pages, sibling_count)
    page_range = build_page_range(request)
    nav = navigation_state(request, page_range, show_first_last)

    controls: List[Control] = []
    if nav.show_first_last:
        controls.append(Control("first", FIRST_LABEL, nav.first_page, not nav.can_go_previous, help="First page"))
    controls.append(Control("prev", previous_label, nav.previous_page, not nav.can_go_previous, help="Previous page"))

    for index, token in enumerate(page_range.tokens):
        if is_ellipsis(token):
            controls.append(Control(f"ellipsis_{index}", ELLIPSIS_LABEL, None, disabled=True))
            continue
        controls.append(
            Control(
                f"page_{token}",
                str(token),
                token,
                is_current=token == request.current_page,
                help=f"Page {token}",
            )
        )

    controls.append(Control("next", next_label, nav.next_page, not nav.can_go_next, help="Next page"))
    if nav.show_first_last:
        controls.append(Control("last", LAST_LABEL, nav.last_page, not nav.can_go_next, help="Last page"))
    return controls


def render_pagination(
    current_page: object,
    total_pages: object,
    sibling_count: object = 1,
    show_first_last: bool = False,
    key: str = "pagination",
    previous_label: str = PREVIOUS_LABEL,
    next_label: str = NEXT_LABEL,
) -> Optional[int]:
    """Render a pager and return the page requested by a click, if any."""
    request = coerce_pagination_request(current_page, total_pages, sibling_count)
    if request.total_pages == 0:
        st.caption("No pages to show.")
        return None

    controls = build_controls(
        request.current_page,
        request.total_pages,
        request.sibling_count,
        show_first_last,
        previous_label=previous_label,
        next_label=next_label,
    )
    requested_page: Optional[int] = None

    columns = st.columns(len(controls), gap="small")
    for column, control in zip(columns, controls):
        with column:
            if control.target is None:
                st.markdown(
                    f'<div class="pagination-ellipsis">{control.label}</div>',
                    unsafe_allow_html=True,
                )
                continue

            clicked = st.button(
                control.label,
                key=f"{key}_{control.key_suffix}",
                disabled=control.disabled,
                type="primary" if control.is_current else "secondary",
                help=control.help,
            )
            if clicked:
                requested_page = resolve_page_change(control.target, request.current_page, request.total_pages)

    return requested_page
