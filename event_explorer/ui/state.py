"""
Explicit explorer state passed through the view tree.
Search filters, results and the selected location live here instead of in globals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from ..errors import APIClientError
from ..models.event import Event
from ..utils.text_cleaning import normalize_keyword
from .api_client import ExplorerAPIClient
from .fallback import scan_dataset

logger = logging.getLogger(__name__)

EMPTY_SEARCH_MESSAGE = "Please enter a keyword to search"
FALLBACK_MESSAGE = "Search failed. Showing matches from the local dataset."
SEARCH_FAILED_MESSAGE = "Search failed. Please try again."


@dataclass
class ExplorerState:
    """Filters, results and selection for one explorer view."""

    keyword: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    results: List[Event] = field(default_factory=list)
    selected_location: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    is_loading: bool = False

    def select_location(self, location: Dict[str, Any]) -> None:
        """Callback handed to the discovery flow and to marker clicks."""
        self.selected_location = location

    def clear_error(self) -> None:
        self.error = None


def run_search(
    state: ExplorerState,
    client: ExplorerAPIClient,
    dataset: Optional[List[Event]] = None,
) -> List[Event]:
    """Search with the filters in *state*; results overwrite the previous ones."""
    keyword = normalize_keyword(state.keyword)
    if not keyword:
        state.error = EMPTY_SEARCH_MESSAGE
        return state.results

    state.is_loading = True
    state.error = None
    try:
        state.results = client.search_events(keyword, state.start_date, state.end_date)
    except APIClientError as exc:
        logger.warning("Search API failed for '%s': %s", keyword, exc)
        if dataset is not None:
            state.error = FALLBACK_MESSAGE
            state.results = scan_dataset(dataset, keyword, state.start_date, state.end_date)
        else:
            state.error = SEARCH_FAILED_MESSAGE
            state.results = []
    finally:
        state.is_loading = False
    return state.results

__all__ = [
    "ExplorerState",
    "run_search",
    "EMPTY_SEARCH_MESSAGE",
    "FALLBACK_MESSAGE",
    "SEARCH_FAILED_MESSAGE",
]
