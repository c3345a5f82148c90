"""Utility functions for the event explorer.

Re-exports the text-cleaning, parsing and date helpers so that imports like
`from ..utils import parse_date` work as expected.
"""

from .text_cleaning import strip_code_fences, normalize_keyword  # noqa: F401
from .datetime_utils import parse_date, in_date_range  # noqa: F401
from .llm_parsing import extract_structured_json, extract_keywords  # noqa: F401

__all__ = [
    "strip_code_fences",
    "normalize_keyword",
    "parse_date",
    "in_date_range",
    "extract_structured_json",
    "extract_keywords",
]
