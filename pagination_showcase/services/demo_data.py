"""Demo dataset paged by the playground pager."""

from __future__ import annotations

from typing import List, Tuple

import pandas as pd

from pagination_showcase.config import DEMO_COLUMNS
from pagination_showcase.utils.pagination import clamp_page_number, compute_total_pages, page_slice

COMPONENT_NAMES = [
    "Accordion",
    "Alert",
    "Badge",
    "Button",
    "Card",
    "Dialog",
    "Form",
    "Pagination",
    "Table",
    "Tabs",
]

STATUS_LABELS = ["stable", "beta", "draft"]


def build_demo_rows(row_count: int, skin_ids: List[str]) -> pd.DataFrame:
    """Build a deterministic catalogue of component/skin rows."""
    if row_count <= 0 or not skin_ids:
        return pd.DataFrame(columns=DEMO_COLUMNS)

    rows = [
        {
            "item_id": index + 1,
            "component": COMPONENT_NAMES[index % len(COMPONENT_NAMES)],
            "skin": skin_ids[(index // len(COMPONENT_NAMES)) % len(skin_ids)],
            "status": STATUS_LABELS[index % len(STATUS_LABELS)],
        }
        for index in range(row_count)
    ]
    return pd.DataFrame(rows, columns=DEMO_COLUMNS)


def get_page(dataframe: pd.DataFrame, page_number: int, page_size: int) -> Tuple[pd.DataFrame, int, int]:
    """Return the rows of one page plus the clamped page number and page count."""
    total_pages = compute_total_pages(len(dataframe), page_size)
    if total_pages == 0:
        return dataframe.iloc[0:0], 1, 0

    page_number = clamp_page_number(page_number, total_pages)
    start, end = page_slice(page_number, page_size)
    return dataframe.iloc[start:end], page_number, total_pages
