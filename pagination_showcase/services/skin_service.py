"""Skin registry for the pagination renderers.

Skins only change presentation. Every skin renders the same token sequence
from ``page_range.compute_page_range``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

from pagination_showcase.config import DEFAULT_SKIN_ID

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Skin:
    id: str
    name: str
    accent_color: str
    accent_text_color: str
    text_color: str
    background_color: str
    border_color: str
    radius: str
    font_family: str


SKINS: Dict[str, Skin] = {
    skin.id: skin
    for skin in (
        Skin(
            id="default",
            name="Default",
            accent_color="#2563eb",
            accent_text_color="#ffffff",
            text_color="#374151",
            background_color="#ffffff",
            border_color="#d1d5db",
            radius="0.25rem",
            font_family="system-ui, sans-serif",
        ),
        Skin(
            id="minimal-clean",
            name="Minimal Clean",
            accent_color="#111111",
            accent_text_color="#ffffff",
            text_color="#111111",
            background_color="#ffffff",
            border_color="#e5e7eb",
            radius="0",
            font_family="Inter, system-ui, sans-serif",
        ),
        Skin(
            id="electric-chaos",
            name="Electric Chaos",
            accent_color="#a855f7",
            accent_text_color="#000000",
            text_color="#22d3ee",
            background_color="#000000",
            border_color="#ec4899",
            radius="0.75rem",
            font_family="'Space Grotesk', system-ui, sans-serif",
        ),
        Skin(
            id="editorial",
            name="Editorial",
            accent_color="#18181b",
            accent_text_color="#ffffff",
            text_color="#3f3f46",
            background_color="#ffffff",
            border_color="#d4d4d8",
            radius="0",
            font_family="Inter, system-ui, sans-serif",
        ),
        Skin(
            id="corporate-classic",
            name="Corporate Classic",
            accent_color="#ca8a04",
            accent_text_color="#ffffff",
            text_color="#374151",
            background_color="#ffffff",
            border_color="#d1d5db",
            radius="0.25rem",
            font_family="system-ui, sans-serif",
        ),
        Skin(
            id="fintech-precision",
            name="Fintech Precision",
            accent_color="#ca8a04",
            accent_text_color="#0a0a0a",
            text_color="#a3a3a3",
            background_color="#171717",
            border_color="#404040",
            radius="0",
            font_family="'JetBrains Mono', ui-monospace, monospace",
        ),
    )
}


def list_skins() -> List[Skin]:
    """Return all skins in display order."""
    return list(SKINS.values())


def get_skin(skin_id: str) -> Skin:
    """Return the skin for ``skin_id``, falling back to the configured default."""
    skin = SKINS.get(skin_id)
    if skin is not None:
        return skin

    logger.warning("Unknown skin %r, falling back to %r", skin_id, DEFAULT_SKIN_ID)
    return SKINS.get(DEFAULT_SKIN_ID, SKINS["default"])


def skin_css(skin: Skin) -> str:
    """Render the CSS that restyles Streamlit buttons for a skin."""
    return f"""
    div[data-testid="stButton"] button {{
        min-width: 2.5rem;
        border-radius: {skin.radius};
        border: 1px solid {skin.border_color};
        background-color: {skin.background_color};
        color: {skin.text_color};
        font-family: {skin.font_family};
    }}
    div[data-testid="stButton"] button[kind="primary"] {{
        background-color: {skin.accent_color};
        border-color: {skin.accent_color};
        color: {skin.accent_text_color};
    }}
    div[data-testid="stButton"] button:disabled {{
        opacity: 0.45;
        cursor: not-allowed;
    }}
    .pagination-ellipsis {{
        display: flex;
        justify-content: center;
        align-items: center;
        min-height: 2.5rem;
        color: {skin.text_color};
        font-family: {skin.font_family};
    }}
    """
