"""Singleton accessor for ChromaDB and helper for obtaining the collection."""

from __future__ import annotations

from urllib.parse import urlparse

import chromadb
from chromadb.api import ClientAPI
from chromadb.api.models.Collection import Collection

from ..config import CHROMA_URL, COLLECTION_NAME, COLLECTION_DESCRIPTION

_client: ClientAPI | None = None


def get_chroma() -> ClientAPI:
    """Return a singleton :class:`chromadb.HttpClient` pointed at ``CHROMA_URL``."""
    global _client
    if _client is None:
        url = urlparse(CHROMA_URL)
        ssl = url.scheme == "https"
        _client = chromadb.HttpClient(
            host=url.hostname or "localhost",
            port=url.port or (443 if ssl else 8000),
            ssl=ssl,
        )
    return _client


def get_collection() -> Collection:
    """Return the events collection, creating it on first use."""
    return get_chroma().get_or_create_collection(
        name=COLLECTION_NAME,
        metadata={"description": COLLECTION_DESCRIPTION},
    )

__all__ = ["get_chroma", "get_collection"]
