"""Centralised configuration for event_explorer.

Environment variables are loaded once and all related constants are
grouped by service for easier maintenance.
"""

from __future__ import annotations

import os
from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Core credentials and endpoints (from environment)
# ---------------------------------------------------------------------------
OPENAI_API_KEY: str | None = os.getenv("OPENAI_API_KEY")
CHROMA_URL: str = os.getenv("CHROMA_URL", "http://localhost:8000")
SERVER_PORT: int = int(os.getenv("SERVER_PORT", "3001"))
DATASET_PATH: str = os.getenv("DATASET_PATH", os.path.join("dataset", "dataset.csv"))
EXPLORER_API_URL: str = os.getenv("EXPLORER_API_URL", "http://localhost:3001/api")

# ---------------------------------------------------------------------------
# Vector store
# ---------------------------------------------------------------------------
COLLECTION_NAME: str = "space_events"
COLLECTION_DESCRIPTION: str = "Space-related events and data"
INGEST_BATCH_SIZE: int = 10

# ---------------------------------------------------------------------------
# OpenAI models
# ---------------------------------------------------------------------------
EMBEDDING_MODEL: str = "text-embedding-ada-002"
COMPLETION_MODEL: str = "gpt-3.5-turbo"

# ---------------------------------------------------------------------------
# Result sizes
# ---------------------------------------------------------------------------
SEARCH_RESULTS: int = 50
DISCOVERY_RESULTS: int = 10
EXPANSION_RESULTS: int = 3
DISCOVERY_PATH_LENGTH: int = 5
RELATED_KEYWORDS_COUNT: int = 5
EXPANSION_KEYWORDS_COUNT: int = 3

# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------
AUTOPLAY_INTERVAL_SECONDS: float = 5.0
DEFAULT_MAP_CENTER: tuple[float, float] = (51.505, -0.09)
DEFAULT_MAP_ZOOM: int = 4

# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # credentials / endpoints
    "OPENAI_API_KEY",
    "CHROMA_URL",
    "SERVER_PORT",
    "DATASET_PATH",
    "EXPLORER_API_URL",
    # vector store
    "COLLECTION_NAME",
    "COLLECTION_DESCRIPTION",
    "INGEST_BATCH_SIZE",
    # models
    "EMBEDDING_MODEL",
    "COMPLETION_MODEL",
    # result sizes
    "SEARCH_RESULTS",
    "DISCOVERY_RESULTS",
    "EXPANSION_RESULTS",
    "DISCOVERY_PATH_LENGTH",
    "RELATED_KEYWORDS_COUNT",
    "EXPANSION_KEYWORDS_COUNT",
    # presentation
    "AUTOPLAY_INTERVAL_SECONDS",
    "DEFAULT_MAP_CENTER",
    "DEFAULT_MAP_ZOOM",
]
