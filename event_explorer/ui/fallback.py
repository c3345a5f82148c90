"""Local dataset scan used when the search API is unreachable."""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from ..models.event import Event
from ..utils.datetime_utils import in_date_range


def scan_dataset(
    events: Iterable[Event],
    keyword: str,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> List[Event]:
    """Case-insensitive substring match on title or summary, plus the date window."""
    needle = keyword.strip().lower()
    matches: List[Event] = []
    for event in events:
        if needle not in event.title.lower() and needle not in event.summary.lower():
            continue
        if start_date is not None and end_date is not None:
            if not in_date_range(event.date, start_date, end_date):
                continue
        matches.append(event)
    return matches

__all__ = ["scan_dataset"]
