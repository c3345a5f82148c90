"""End-to-end workflows."""

from .ingest_pipeline import run as run_ingestion  # noqa: F401

__all__ = ["run_ingestion"]
