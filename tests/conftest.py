"""
Test configuration and fixtures
"""
from pathlib import Path

import pytest

from pagination_showcase.services.page_range import is_ellipsis


APP_PATH = Path(__file__).resolve().parent.parent / "pagination_showcase" / "app.py"


@pytest.fixture
def app_path():
    """Absolute path of the Streamlit entrypoint."""
    return APP_PATH


@pytest.fixture
def expand_tokens():
    """Expand ellipsis tokens into the pages they elide."""

    def _expand(tokens, total_pages):
        pages = []
        for index, token in enumerate(tokens):
            if not is_ellipsis(token):
                pages.append(token)
                continue
            after = tokens[index + 1] if index + 1 < len(tokens) else total_pages + 1
            pages.extend(range(pages[-1] + 1, after))
        return pages

    return _expand
