"""Keyword search: embedding + vector query + optional date window."""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from ..config import SEARCH_RESULTS
from ..models.event import Event
from ..utils.datetime_utils import in_date_range
from .embeddings import generate_embedding
from .vector_search import query_events

logger = logging.getLogger(__name__)


def search_events(
    keyword: str,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> List[Event]:
    """Return the events nearest to *keyword*, filtered to ``[start_date, end_date]``.

    The window only applies when both bounds are given.
    """
    logger.info("Searching events for keyword: %s", keyword)
    embedding = generate_embedding(keyword)
    results = query_events(embedding, SEARCH_RESULTS)

    if start_date is not None and end_date is not None:
        results = [event for event in results if in_date_range(event.date, start_date, end_date)]
        logger.info(
            "%d events within %s..%s", len(results), start_date.isoformat(), end_date.isoformat()
        )

    return results

__all__ = ["search_events"]
