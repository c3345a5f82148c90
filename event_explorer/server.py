"""Entry point: ingest the dataset, then serve the API."""

from __future__ import annotations

import logging

from .logging_config import logging as _  # noqa: F401  # ensure config applied early
from .api.app import create_app
from .config import SERVER_PORT
from .workflows.ingest_pipeline import run as run_ingestion

logger = logging.getLogger(__name__)


def main() -> None:
    """Initialise the collection and start the HTTP server."""
    try:
        run_ingestion()
    except Exception:
        logger.exception("Failed to initialize database")

    app = create_app()
    logger.info("Server running on port %d", SERVER_PORT)
    app.run(host="0.0.0.0", port=SERVER_PORT)

__all__ = ["main"]
