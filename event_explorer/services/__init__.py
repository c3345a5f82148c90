"""Service layer modules grouping business logic by concern.

This module provides convenience re-exports so that callers can simply do for
example `from event_explorer.services import search_events` without having to
know which underlying module provides the symbol.
"""

from .discovery import assemble_discovery_path, rank_events  # noqa: F401
from .embeddings import generate_embedding  # noqa: F401
from .ingestion import initialize_collection, load_dataset  # noqa: F401
from .keywords import generate_related_keywords  # noqa: F401
from .search import search_events  # noqa: F401
from .vector_search import query_events  # noqa: F401

__all__ = [
    "assemble_discovery_path",
    "rank_events",
    "generate_embedding",
    "initialize_collection",
    "load_dataset",
    "generate_related_keywords",
    "search_events",
    "query_events",
]
