"""Startup ingestion: load the CSV dataset into the Chroma collection once."""

from __future__ import annotations

import logging

from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from ..config import DATASET_PATH
from ..services.ingestion import IngestStats, initialize_collection

logger = logging.getLogger(__name__)


def run(dataset_path: str = DATASET_PATH) -> IngestStats:
    """Execute the ingestion pipeline once and return its statistics."""
    logger.info("Starting dataset ingestion from %s", dataset_path)
    stats = initialize_collection(dataset_path)
    _log_stats(stats)
    return stats


def _log_stats(stats: IngestStats) -> None:
    logger.info("=== Ingestion Statistics ===")
    if stats.already_populated:
        logger.info("Collection already populated – nothing ingested")
    logger.info("Rows read from dataset: %d", stats.rows_loaded)
    logger.info("Rows skipped (missing fields): %d", stats.rows_skipped)
    logger.info("Records added to collection: %d", stats.records_added)
    logger.info("============================")

__all__ = ["run"]
