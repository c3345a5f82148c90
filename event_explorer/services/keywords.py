"""Related-keyword generation via OpenAI chat completions."""

from __future__ import annotations

import logging
from typing import List

from openai import OpenAIError

from ..clients.openai_client import get_openai
from ..config import COMPLETION_MODEL, RELATED_KEYWORDS_COUNT
from ..errors import ProviderError
from ..utils.llm_parsing import extract_keywords

logger = logging.getLogger(__name__)

SYSTEM_PROMPT: str = (
    "You are a helpful assistant that generates related space exploration keywords."
)


def generate_related_keywords(keyword: str, count: int = RELATED_KEYWORDS_COUNT) -> List[str]:
    """Ask the completion model for *count* keywords related to *keyword*.

    Raises :class:`ProviderError` when the API call fails and ``ValueError``
    when the reply holds no JSON.
    """
    logger.info("Generating %d related keywords for: %s", count, keyword)
    try:
        response = get_openai().chat.completions.create(
            model=COMPLETION_MODEL,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": (
                        f'Generate {count} related keywords for space exploration topic: "{keyword}".'
                        " Return only the keywords as a JSON array."
                    ),
                },
            ],
            temperature=0.7,
            max_tokens=150,
            response_format={"type": "json_object"},
        )
    except OpenAIError as exc:
        logger.error("Error generating related keywords: %s", exc)
        raise ProviderError("openai", "completion request failed") from exc

    content: str = response.choices[0].message.content or ""
    logger.debug("Raw completion response: %s", content)
    keywords = extract_keywords(content)
    logger.info("Got %d related keywords", len(keywords))
    return keywords

__all__ = ["generate_related_keywords", "SYSTEM_PROMPT"]
