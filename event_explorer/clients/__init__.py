"""Convenience re-exports for singleton SDK accessors."""

from .openai_client import get_openai  # noqa: F401
from .chroma_client import get_chroma, get_collection  # noqa: F401
from .explorer_session import get_session as get_explorer_session  # noqa: F401

__all__ = [
    "get_openai",
    "get_chroma",
    "get_collection",
    "get_explorer_session",
]
