"""Nearest-neighbour queries against the Chroma events collection."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from chromadb.api.models.Collection import Collection

from ..clients.chroma_client import get_collection
from ..errors import ProviderError
from ..models.event import Embedding, Event

logger = logging.getLogger(__name__)


def query_events(
    embedding: Embedding,
    n_results: int,
    collection: Optional[Collection] = None,
) -> List[Event]:
    """Return up to *n_results* events closest to *embedding*.

    Each event carries its distance as ``score``; order is the store's
    (ascending distance).
    """
    try:
        collection = collection if collection is not None else get_collection()
        query_results = collection.query(
            query_embeddings=[embedding],
            n_results=n_results,
            include=["metadatas", "distances"],
        )
    except Exception as exc:  # chromadb surfaces transport and server errors alike
        logger.error("Error querying collection: %s", exc)
        raise ProviderError("chroma", "vector query failed") from exc

    return _to_events(query_results)


def _to_events(query_results: Dict[str, Any]) -> List[Event]:
    metadatas = (query_results.get("metadatas") or [[]])[0] or []
    distances = (query_results.get("distances") or [[]])[0] or []
    ids = (query_results.get("ids") or [[]])[0] or []

    events: List[Event] = []
    for index, metadata in enumerate(metadatas):
        if not metadata:
            continue
        score = distances[index] if index < len(distances) else None
        event_id = ids[index] if index < len(ids) else None
        try:
            events.append(Event.from_metadata(metadata, score=score, event_id=event_id))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping malformed record %s: %s", event_id, exc)
    logger.info("Vector query returned %d events", len(events))
    return events

__all__ = ["query_events"]
