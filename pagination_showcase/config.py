"""Application configuration constants."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
ASSETS_DIR = ROOT_DIR / "assets"

APP_TITLE = "Pagination Showcase"

DEFAULT_SKIN_ID = os.getenv("SHOWCASE_DEFAULT_SKIN", "default")
SHOWCASE_SIBLING_COUNT = os.getenv("SHOWCASE_SIBLING_COUNT", "1")
LOG_LEVEL = os.getenv("SHOWCASE_LOG_LEVEL", "INFO")

MAX_SIBLING_COUNT = 4
MAX_PLAYGROUND_PAGES = 500

DEMO_ROW_COUNT = 237
DEFAULT_PAGE_SIZE = 10
PAGE_SIZE_OPTIONS = [5, 10, 25, 50]

ELLIPSIS_LABEL = "…"
PREVIOUS_LABEL = "‹"
NEXT_LABEL = "›"
FIRST_LABEL = "«"
LAST_LABEL = "»"

# (caption, current_page, total_pages, show_first_last)
EXAMPLE_SCENARIOS = [
    ("Standard pagination", 5, 10, False),
    ("First page (prev disabled)", 1, 10, False),
    ("Last page (next disabled)", 10, 10, False),
    ("With first/last buttons", 5, 10, True),
]

TOKEN_COLUMNS = ["position", "kind", "page", "state"]

DEMO_COLUMNS = ["item_id", "component", "skin", "status"]
