"""Discovery path assembly: a short, ordered tour of related events."""

from __future__ import annotations

import logging
from datetime import date
from functools import cmp_to_key
from typing import List

from ..config import (
    DISCOVERY_PATH_LENGTH,
    DISCOVERY_RESULTS,
    EXPANSION_KEYWORDS_COUNT,
    EXPANSION_RESULTS,
)
from ..errors import ProviderError
from ..models.event import Event
from ..utils.datetime_utils import parse_date
from .embeddings import generate_embedding
from .keywords import generate_related_keywords
from .vector_search import query_events

logger = logging.getLogger(__name__)


def _compare(a: Event, b: Event) -> int:
    # Score first (lower is closer); newest first when either score is missing.
    if a.score is not None and b.score is not None:
        if a.score != b.score:
            return -1 if a.score < b.score else 1
    date_a = parse_date(a.date) or date.min
    date_b = parse_date(b.date) or date.min
    if date_a == date_b:
        return 0
    return -1 if date_a > date_b else 1


def rank_events(events: List[Event]) -> List[Event]:
    """Sort by ascending score, tie-broken by descending date."""
    return sorted(events, key=cmp_to_key(_compare))


def assemble_discovery_path(keyword: str) -> List[Event]:
    """Build a discovery path of at most ``DISCOVERY_PATH_LENGTH`` events.

    Failures of the initial embedding/query propagate as :class:`ProviderError`.
    When direct hits are sparse the path is topped up from related keywords;
    any failure there ends the expansion and the events collected so far are
    returned.
    """
    logger.info("Assembling discovery path for keyword: %s", keyword)
    embedding = generate_embedding(keyword)
    results = rank_events(query_events(embedding, DISCOVERY_RESULTS))

    if len(results) < DISCOVERY_PATH_LENGTH:
        try:
            _expand(keyword, results)
        except (ProviderError, ValueError) as exc:
            logger.warning("Error expanding discovery path, keeping %d events: %s", len(results), exc)

    path = results[:DISCOVERY_PATH_LENGTH]
    logger.info("Discovery path for '%s' has %d stops", keyword, len(path))
    return path


def _expand(keyword: str, results: List[Event]) -> None:
    """Append events found via related keywords to *results* in place."""
    related_keywords = generate_related_keywords(keyword, EXPANSION_KEYWORDS_COUNT)
    seen = {event.title for event in results}

    for related_keyword in related_keywords:
        if len(results) >= DISCOVERY_PATH_LENGTH:
            break
        related_embedding = generate_embedding(related_keyword)
        for candidate in query_events(related_embedding, EXPANSION_RESULTS):
            if candidate.title in seen:
                continue
            results.append(candidate)
            seen.add(candidate.title)
            if len(results) >= DISCOVERY_PATH_LENGTH:
                break

__all__ = ["assemble_discovery_path", "rank_events"]
