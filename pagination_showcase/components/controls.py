"""Sidebar panel for the skin switcher and playground parameters."""

from __future__ import annotations

from typing import Dict, List

import streamlit as st

from pagination_showcase.config import MAX_PLAYGROUND_PAGES, MAX_SIBLING_COUNT
from pagination_showcase.services.skin_service import Skin


def render_skin_switcher(skins: List[Skin], default_skin_id: str) -> str:
    """Render the skin selector and return the selected skin id."""
    st.sidebar.markdown("## Skin")
    skin_ids = [skin.id for skin in skins]
    names = {skin.id: skin.name for skin in skins}
    index = skin_ids.index(default_skin_id) if default_skin_id in skin_ids else 0

    return st.sidebar.selectbox(
        "Skin",
        options=skin_ids,
        index=index,
        format_func=lambda skin_id: names[skin_id],
        key="active_skin",
        label_visibility="collapsed",
    )


def render_playground_controls(default_sibling_count: int) -> Dict[str, object]:
    """Render the playground parameter inputs and return their values."""
    st.sidebar.markdown("## Playground")

    total_pages = st.sidebar.number_input(
        "Total pages",
        min_value=0,
        max_value=MAX_PLAYGROUND_PAGES,
        value=20,
        step=1,
        key="playground_total_pages",
    )
    sibling_count = st.sidebar.slider(
        "Sibling count",
        min_value=0,
        max_value=MAX_SIBLING_COUNT,
        value=min(max(default_sibling_count, 0), MAX_SIBLING_COUNT),
        key="playground_sibling_count",
    )
    show_first_last = st.sidebar.checkbox("Show first/last buttons", key="playground_show_first_last")

    return {
        "total_pages": int(total_pages),
        "sibling_count": int(sibling_count),
        "show_first_last": bool(show_first_last),
    }
