"""Shared helpers for cleaning free text and LLM output."""

from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def strip_code_fences(text: str) -> str:
    """Remove a surrounding Markdown code fence (```json ... ```) if present."""
    if not text:
        return ""

    cleaned: str = text.strip()
    fence: Final[str] = "```"

    if cleaned.startswith(fence + "json"):
        cleaned = cleaned[len(fence + "json") :].strip()
    elif cleaned.startswith(fence):
        cleaned = cleaned[len(fence) :].strip()
    if cleaned.endswith(fence):
        cleaned = cleaned[: -len(fence)].strip()

    return cleaned


def normalize_keyword(keyword: object) -> str:
    """Return *keyword* stripped of surrounding whitespace, or ``""``."""
    if not isinstance(keyword, str):
        return ""
    return keyword.strip()

__all__ = ["strip_code_fences", "normalize_keyword"]
