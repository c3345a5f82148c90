"""Domain models used across the project."""

from .event import Event, Embedding, REQUIRED_FIELDS  # noqa: F401

__all__ = ["Event", "Embedding", "REQUIRED_FIELDS"]
