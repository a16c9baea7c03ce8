"""Top navigation bar component."""

from __future__ import annotations

import streamlit as st

from pagination_showcase.config import APP_TITLE
from pagination_showcase.services.skin_service import Skin


def render_navbar(skin: Skin) -> None:
    """Render showcase header with the active skin."""
    st.markdown(
        f"""
        <div class="navbar">
            <div class="navbar-title">{APP_TITLE}</div>
            <div class="navbar-meta">Skin: {skin.name}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
