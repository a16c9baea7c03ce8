"""Streamlit app entrypoint for the Pagination Showcase."""

from __future__ import annotations

import logging
from typing import List, Tuple

import streamlit as st

from pagination_showcase.components.controls import render_playground_controls, render_skin_switcher
from pagination_showcase.components.navbar import render_navbar
from pagination_showcase.components.pagination import render_pagination
from pagination_showcase.components.table import render_rows_table, render_token_table
from pagination_showcase.config import (
    APP_TITLE,
    ASSETS_DIR,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SKIN_ID,
    DEMO_ROW_COUNT,
    EXAMPLE_SCENARIOS,
    LOG_LEVEL,
    PAGE_SIZE_OPTIONS,
    SHOWCASE_SIBLING_COUNT,
)
from pagination_showcase.services import demo_data, skin_service
from pagination_showcase.services.page_range import compute_page_range
from pagination_showcase.services.skin_service import Skin
from pagination_showcase.services.validation_service import coerce_sibling_count
from pagination_showcase.utils.pagination import clamp_page_number

_log_level = logging.getLevelName(str(LOG_LEVEL).upper())
logging.basicConfig(
    level=_log_level if isinstance(_log_level, int) else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

st.set_page_config(page_title=APP_TITLE, layout="wide")


def load_css(skin: Skin) -> None:
    """Load app-level CSS plus the active skin's button styling."""
    css_path = ASSETS_DIR / "styles.css"
    base_css = ""
    if css_path.exists():
        with css_path.open("r", encoding="utf-8") as css_file:
            base_css = css_file.read()
    st.markdown(f"<style>{base_css}{skin_service.skin_css(skin)}</style>", unsafe_allow_html=True)


def init_session_state() -> None:
    """Initialize required session-state variables."""
    st.session_state.setdefault("playground_page", 1)
    st.session_state.setdefault("table_page", 1)
    st.session_state.setdefault("notifications", [])


def queue_notification(level: str, message: str) -> None:
    """Queue a UI notification for display on the next render pass."""
    st.session_state["notifications"].append((level, message))


def show_notifications() -> None:
    """Render queued status messages then clear the queue."""
    notifications: List[Tuple[str, str]] = st.session_state.get("notifications", [])
    if not notifications:
        return

    for level, message in notifications:
        if level == "success":
            st.success(message)
        elif level == "warning":
            st.warning(message)
        else:
            st.info(message)

    st.session_state["notifications"] = []


@st.cache_data(show_spinner=False)
def get_demo_rows(row_count: int, skin_ids: Tuple[str, ...]):
    """Build the demo dataset once per row count and skin list."""
    return demo_data.build_demo_rows(row_count, list(skin_ids))


def render_examples() -> None:
    """Render the fixed example pagers."""
    st.markdown("### Examples")
    for index, (caption, current_page, total_pages, show_first_last) in enumerate(EXAMPLE_SCENARIOS):
        st.caption(caption)
        render_pagination(
            current_page,
            total_pages,
            sibling_count=1,
            show_first_last=show_first_last,
            key=f"example_{index}",
        )


def render_playground(params: dict) -> None:
    """Render the interactive pager bound to session state."""
    st.markdown("### Playground")
    total_pages = params["total_pages"]
    current_page = clamp_page_number(st.session_state["playground_page"], total_pages)
    st.session_state["playground_page"] = current_page

    requested_page = render_pagination(
        current_page,
        total_pages,
        sibling_count=params["sibling_count"],
        show_first_last=params["show_first_last"],
        key="playground",
    )
    if requested_page is not None:
        logger.debug("Playground navigation %d -> %d", current_page, requested_page)
        st.session_state["playground_page"] = requested_page
        queue_notification("info", f"Playground moved to page {requested_page}.")
        st.rerun()

    st.caption(f"Page {current_page} of {total_pages}")
    render_token_table(compute_page_range(current_page, total_pages, params["sibling_count"]), current_page)


def render_demo_table(sibling_count: int) -> None:
    """Render the demo dataset paged by a pager."""
    st.markdown("### Paged table")
    page_size = st.selectbox(
        "Rows per page",
        options=PAGE_SIZE_OPTIONS,
        index=PAGE_SIZE_OPTIONS.index(DEFAULT_PAGE_SIZE),
        key="table_page_size",
    )
    rows_df = get_demo_rows(DEMO_ROW_COUNT, tuple(skin.id for skin in skin_service.list_skins()))
    page_df, page_number, total_pages = demo_data.get_page(rows_df, st.session_state["table_page"], page_size)
    st.session_state["table_page"] = page_number

    st.caption(f"Total Rows: {len(rows_df)}")
    render_rows_table(page_df)

    requested_page = render_pagination(page_number, total_pages, sibling_count=sibling_count, key="table")
    if requested_page is not None:
        st.session_state["table_page"] = requested_page
        st.rerun()


def main() -> None:
    """Render and run the Pagination Showcase."""
    init_session_state()

    try:
        skins = skin_service.list_skins()
        selected_skin_id = render_skin_switcher(skins, DEFAULT_SKIN_ID)
        skin = skin_service.get_skin(selected_skin_id)
        params = render_playground_controls(coerce_sibling_count(SHOWCASE_SIBLING_COUNT))
        load_css(skin)
    except Exception as exc:  # pragma: no cover - streamlit runtime guard
        logger.exception("Showcase initialization failed")
        st.error(f"Application initialization failed: {exc}")
        st.stop()

    render_navbar(skin)
    render_examples()
    st.markdown("---")
    render_playground(params)
    st.markdown("---")
    render_demo_table(params["sibling_count"])

    show_notifications()


if __name__ == "__main__":
    main()
