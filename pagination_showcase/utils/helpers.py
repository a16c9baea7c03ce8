"""Helper utilities for coercing loosely-typed widget and caller values."""

from __future__ import annotations

import math
from typing import Optional

import pandas as pd


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value).strip()


def coerce_int(value: object) -> Optional[int]:
    """Convert a number-like value to int, truncating toward zero.

    Returns None for nulls, NaN, infinities and unparsable text.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value

    if isinstance(value, float):
        number = value
    else:
        raw_value = normalize_text(value)
        if not raw_value:
            return None
        try:
            number = float(raw_value)
        except (TypeError, ValueError):
            return None

    if not math.isfinite(number):
        return None
    return int(number)
