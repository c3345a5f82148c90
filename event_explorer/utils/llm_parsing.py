"""Utilities for parsing structured outputs returned by LLM calls.

The completion model is asked for a JSON array of keywords but, depending on
``response_format``, it answers with either a bare array or an object such as
``{"keywords": [...]}``.  Both shapes are normalised here.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List

from .text_cleaning import strip_code_fences

__all__ = ["extract_structured_json", "extract_keywords"]


def extract_structured_json(response_text: str) -> Dict[str, Any]:
    """Robustly extract JSON from an LLM response.

    Parameters
    ----------
    response_text
        The raw message content returned by the completion API.

    Returns
    -------
    dict[str, Any]
        The parsed JSON object.  When the top-level parsed value is a list it
        is wrapped into ``{"keywords": <list>}`` so that downstream code can
        always rely on accessing the ``"keywords"`` key.

    Raises
    ------
    ValueError
        If no valid JSON snippet can be located in *response_text*.
    """

    cleaned: str = strip_code_fences(response_text or "")

    # 1. Try to parse the whole string first (fast path)
    try:
        return _wrap(json.loads(cleaned))
    except json.JSONDecodeError:
        pass

    # 2. Search for fenced JSON block anywhere in the text
    fenced = re.search(
        r"```(?:json)?\s*([\[{].*?[\]}])\s*```",
        cleaned,
        flags=re.DOTALL | re.IGNORECASE,
    )
    if fenced:
        snippet = fenced.group(1).strip()
        try:
            return _wrap(json.loads(snippet))
        except json.JSONDecodeError:
            cleaned = snippet

    # 3. Progressive truncation from first { or [
    starts = [i for i in (cleaned.find("{"), cleaned.find("[")) if i != -1]
    if not starts:
        raise ValueError("Could not locate JSON in completion response")

    candidate = cleaned[min(starts):]
    for end in range(len(candidate), 0, -1):
        try:
            return _wrap(json.loads(candidate[:end].strip()))
        except json.JSONDecodeError:
            continue

    raise ValueError("Could not locate JSON in completion response")


def extract_keywords(response_text: str) -> List[str]:
    """Return the list of non-blank keyword strings found in *response_text*."""
    parsed = extract_structured_json(response_text)
    keywords = parsed.get("keywords", [])
    if not isinstance(keywords, list):
        return []
    return [kw.strip() for kw in keywords if isinstance(kw, str) and kw.strip()]


def _wrap(parsed: Any) -> Dict[str, Any]:
    if isinstance(parsed, list):
        return {"keywords": parsed}
    if isinstance(parsed, dict):
        return parsed
    raise ValueError("Completion response is neither a JSON object nor an array")
