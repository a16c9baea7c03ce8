"""Read-only tables for the token inspector and the demo rows."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from pagination_showcase.config import TOKEN_COLUMNS
from pagination_showcase.services.page_range import PageRangeResult, is_ellipsis


def token_frame(page_range: PageRangeResult, current_page: int) -> pd.DataFrame:
    """Describe each token of a page range as one table row."""
    rows = []
    for position, token in enumerate(page_range.tokens, start=1):
        if is_ellipsis(token):
            rows.append({"position": position, "kind": "ellipsis", "page": None, "state": "gap"})
            continue
        rows.append(
            {
                "position": position,
                "kind": "page",
                "page": token,
                "state": "current" if token == current_page else "link",
            }
        )
    dataframe = pd.DataFrame(rows, columns=TOKEN_COLUMNS)
    dataframe["page"] = dataframe["page"].astype("Int64")
    return dataframe


def render_token_table(page_range: PageRangeResult, current_page: int) -> None:
    """Render the token inspector with the previous/next flags."""
    st.caption(
        f"is_first_page={page_range.is_first_page} · is_last_page={page_range.is_last_page} · "
        f"ellipses={page_range.ellipsis_count}"
    )
    dataframe = token_frame(page_range, current_page)
    if dataframe.empty:
        st.info("No tokens: the range is empty.")
        return
    st.dataframe(dataframe, hide_index=True, width="stretch")


def render_rows_table(page_df: pd.DataFrame) -> None:
    """Render the rows of the selected demo page."""
    if page_df.empty:
        st.info("No rows available.")
        return
    st.dataframe(page_df, hide_index=True, width="stretch")
