"""Persistence layer: CSV dataset loading and batched Chroma ingestion."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd
from chromadb.api.models.Collection import Collection

from ..clients.chroma_client import get_collection
from ..config import DATASET_PATH, INGEST_BATCH_SIZE
from ..errors import ProviderError
from ..models.event import REQUIRED_FIELDS, Event
from .embeddings import generate_embedding

logger = logging.getLogger(__name__)

DATASET_COLUMNS = ["id", "title", "summary", "url", "lat", "long", "date"]


@dataclass(slots=True)
class IngestStats:
    """Counters reported once ingestion finishes."""

    rows_loaded: int = 0
    rows_skipped: int = 0
    records_added: int = 0
    already_populated: bool = False


def read_dataset(path: str) -> pd.DataFrame:
    """Read the dataset CSV as strings; blank cells become ``NaN``."""
    df = pd.read_csv(path, dtype=str, skipinitialspace=True)
    for column in DATASET_COLUMNS:
        if column not in df.columns:
            df[column] = pd.NA
    return df[DATASET_COLUMNS]


def rows_to_events(df: pd.DataFrame) -> List[Event]:
    """Convert dataset rows to events, dropping rows missing required fields."""
    events: List[Event] = []
    for row in df.to_dict(orient="records"):
        if any(_blank(row.get(field)) for field in REQUIRED_FIELDS):
            continue
        try:
            lat = float(row["lat"])
            long = float(row["long"])
        except ValueError:
            logger.debug("Skipping row with non-numeric coordinates: %s", row.get("title"))
            continue
        if not (math.isfinite(lat) and math.isfinite(long)):
            logger.debug("Skipping row with non-finite coordinates: %s", row.get("title"))
            continue
        events.append(
            Event(
                id=None if _blank(row.get("id")) else str(row["id"]).strip(),
                title=str(row["title"]).strip(),
                summary=str(row["summary"]).strip(),
                url="" if _blank(row.get("url")) else str(row["url"]).strip(),
                lat=lat,
                long=long,
                date=str(row["date"]).strip(),
            )
        )
    return events


def load_dataset(path: str = DATASET_PATH) -> List[Event]:
    """Load the dataset at *path* into events."""
    df = read_dataset(path)
    events = rows_to_events(df)
    logger.info(
        "Loaded %d records from CSV (%d skipped for missing fields)",
        len(df),
        len(df) - len(events),
    )
    return events


def add_events(collection: Collection, events: List[Event], batch_size: int = INGEST_BATCH_SIZE) -> int:
    """Embed *events* and add them to *collection* in batches; return count added."""
    added = 0
    for start in range(0, len(events), batch_size):
        batch = events[start : start + batch_size]

        ids: List[str] = []
        embeddings: List[List[float]] = []
        metadatas = []
        documents: List[str] = []
        for index, event in enumerate(batch):
            combined_text = event.overview_text()
            ids.append(event.id or f"item-{start}-{index}")
            embeddings.append(generate_embedding(combined_text))
            metadatas.append(event.to_metadata())
            documents.append(combined_text)

        try:
            collection.add(ids=ids, embeddings=embeddings, metadatas=metadatas, documents=documents)
        except Exception as exc:  # chromadb surfaces transport and server errors alike
            logger.error("Error adding batch %d to collection: %s", start // batch_size + 1, exc)
            raise ProviderError("chroma", "collection add failed") from exc

        added += len(batch)
        logger.info("Added batch %d to collection", start // batch_size + 1)
    return added


def initialize_collection(
    dataset_path: str = DATASET_PATH,
    collection: Optional[Collection] = None,
) -> IngestStats:
    """Populate the events collection from the dataset unless it already holds data."""
    stats = IngestStats()
    collection = collection if collection is not None else get_collection()

    if collection.count() > 0:
        logger.info("Collection %s already populated", collection.name)
        stats.already_populated = True
        return stats

    if not os.path.exists(dataset_path):
        logger.error("Dataset file not found: %s", dataset_path)
        return stats

    df = read_dataset(dataset_path)
    events = rows_to_events(df)
    stats.rows_loaded = len(df)
    stats.rows_skipped = len(df) - len(events)
    logger.info("Loaded %d records from CSV", stats.rows_loaded)

    stats.records_added = add_events(collection, events)
    logger.info("Database initialization complete")
    return stats


def _blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return bool(pd.isna(value))

__all__ = [
    "IngestStats",
    "read_dataset",
    "rows_to_events",
    "load_dataset",
    "add_events",
    "initialize_collection",
]
