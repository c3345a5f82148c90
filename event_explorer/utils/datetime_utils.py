"""Utility functions for working with event dates."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

import pandas as pd

__all__ = [
    "parse_date",
    "in_date_range",
]


def parse_date(value: Any) -> Optional[date]:
    """Parse *value* into a calendar date, or return ``None`` if it is not one.

    Accepts ``date``/``datetime`` objects and any string pandas can read
    (``2012-08-06``, ``2012-08-06T05:17:00Z``, ``08/06/2012``...).
    """
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value if type(value) is date else value.date()
    text = str(value).strip()
    # ISO dates cover any year; pandas timestamps stop at 1677-09-21.
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass
    parsed = pd.to_datetime(text, errors="coerce")
    if pd.isna(parsed):
        return None
    return parsed.date()


def in_date_range(value: Any, start: date, end: date) -> bool:
    """Return ``True`` when *value* parses to a date within ``[start, end]``."""
    parsed = parse_date(value)
    if parsed is None:
        return False
    return start <= parsed <= end
