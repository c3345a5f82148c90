"""Definition of the `Event` dataclass used throughout the project."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

# Type alias for embedding vectors
Embedding = List[float]

REQUIRED_FIELDS = ("title", "summary", "lat", "long", "date")


@dataclass(slots=True, frozen=True)
class Event:
    """A space-related event pinned to a location on the map.

    ``score`` is the vector-store distance (lower is more similar) and is only
    set on events returned by a similarity query.
    """

    title: str
    summary: str
    lat: float
    long: float
    date: str
    url: str = ""
    id: Optional[str] = None
    score: Optional[float] = None

    @classmethod
    def from_metadata(
        cls,
        metadata: Dict[str, Any],
        score: Optional[float] = None,
        event_id: Optional[str] = None,
    ) -> "Event":
        """Build an event from a vector-store metadata mapping."""
        return cls(
            id=event_id,
            title=str(metadata["title"]),
            summary=str(metadata["summary"]),
            url=str(metadata.get("url") or ""),
            lat=float(metadata["lat"]),
            long=float(metadata["long"]),
            date=str(metadata["date"]),
            score=score,
        )

    def overview_text(self) -> str:
        """Return the concatenation of title and summary for embedding."""
        return f"{self.title} {self.summary}"

    def to_metadata(self) -> Dict[str, Any]:
        """Metadata stored alongside the vector in the collection."""
        return {
            "title": self.title,
            "summary": self.summary,
            "url": self.url,
            "lat": self.lat,
            "long": self.long,
            "date": self.date,
        }

    def to_location(self) -> Dict[str, Any]:
        """The payload handed to the map when this event is selected."""
        return {
            "lat": self.lat,
            "long": self.long,
            "title": self.title,
            "summary": self.summary,
            "url": self.url,
            "date": self.date,
        }

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation; ``id`` and ``score`` only when set."""
        data: Dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        data.update(self.to_metadata())
        if self.score is not None:
            data["score"] = self.score
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Event":
        """Inverse of :meth:`to_dict`, used on API responses."""
        score = data.get("score")
        return cls.from_metadata(
            data,
            score=float(score) if score is not None else None,
            event_id=data.get("id"),
        )

__all__ = ["Event", "Embedding", "REQUIRED_FIELDS"]
