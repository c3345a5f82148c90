"""Client for the explorer HTTP API."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional

import requests

from ..clients.explorer_session import get_session
from ..config import EXPLORER_API_URL
from ..errors import APIClientError
from ..models.event import Event

logger = logging.getLogger(__name__)


class ExplorerAPIClient:
    """Thin wrapper over ``POST /api/*`` returning domain objects."""

    def __init__(
        self,
        base_url: str = EXPLORER_API_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else get_session()
        self.timeout = timeout

    def search_events(
        self,
        keyword: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Event]:
        """Search for events by keyword and optional date range."""
        data = self._post(
            "search",
            {
                "keyword": keyword,
                "startDate": start_date.isoformat() if start_date else None,
                "endDate": end_date.isoformat() if end_date else None,
            },
        )
        return self._events("search", data)

    def get_related_keywords(self, keyword: str) -> List[str]:
        """Get related keywords for a given keyword."""
        data = self._post("related-keywords", {"keyword": keyword})
        keywords = data.get("relatedKeywords", []) if isinstance(data, dict) else None
        if not isinstance(keywords, list):
            logger.error("Unexpected related-keywords response: %r", data)
            raise APIClientError("Malformed response from related-keywords")
        return [str(kw) for kw in keywords]

    def get_discovery_path(self, keyword: str) -> List[Event]:
        """Get a discovery path for a given keyword."""
        data = self._post("discovery-path", {"keyword": keyword})
        return self._events("discovery-path", data)

    def _events(self, endpoint: str, data: Any) -> List[Event]:
        if not isinstance(data, list):
            logger.error("Expected a list from %s, got %s", endpoint, type(data).__name__)
            raise APIClientError(f"Malformed response from {endpoint}")
        try:
            return [Event.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            logger.error("Malformed event in %s response: %s", endpoint, exc)
            raise APIClientError(f"Malformed response from {endpoint}") from exc

    def _post(self, endpoint: str, body: Dict[str, Any]) -> Any:
        url = f"{self.base_url}/{endpoint}"
        try:
            response = self.session.post(url, json=body, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Error calling %s: %s", url, exc)
            raise APIClientError(f"Request to {endpoint} failed") from exc

__all__ = ["ExplorerAPIClient"]
