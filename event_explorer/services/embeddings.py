"""Embedding utilities using the OpenAI API."""

from __future__ import annotations

import logging
from typing import List

from openai import OpenAIError

from ..clients.openai_client import get_openai
from ..config import EMBEDDING_MODEL
from ..errors import ProviderError

logger = logging.getLogger(__name__)


def generate_embedding(text: str) -> List[float]:
    """Generate a vector embedding for *text* using the configured model."""
    logger.info("Generating embedding for text (first 50 chars): %s…", text[:50])
    try:
        response = get_openai().embeddings.create(
            model=EMBEDDING_MODEL,
            input=text,
        )
    except OpenAIError as exc:
        logger.error("Error generating embedding: %s", exc)
        raise ProviderError("openai", "embedding request failed") from exc
    embedding = response.data[0].embedding
    logger.debug("Generated embedding of length %d", len(embedding))
    return embedding

__all__ = ["generate_embedding"]
