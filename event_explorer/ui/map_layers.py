"""Marker and heatmap data for the map view."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..config import DEFAULT_MAP_CENTER, DEFAULT_MAP_ZOOM
from ..models.event import Event


def heat_intensity(event: Event) -> float:
    """Map a distance score to ``(0, 1]``; closer events glow brighter."""
    if event.score is None:
        return 1.0
    return 1.0 / (1.0 + max(event.score, 0.0))


def build_markers(events: Iterable[Event]) -> List[Dict[str, Any]]:
    return [
        {
            "position": [event.lat, event.long],
            "title": event.title,
            "summary": event.summary,
            "url": event.url,
            "date": event.date,
        }
        for event in events
    ]


def build_heatmap_points(events: Iterable[Event]) -> List[List[float]]:
    return [[event.lat, event.long, heat_intensity(event)] for event in events]


def map_view(events: List[Event]) -> Dict[str, Any]:
    """Everything the map needs to render *events*: centre, zoom and both layers."""
    return {
        "center": list(DEFAULT_MAP_CENTER),
        "zoom": DEFAULT_MAP_ZOOM,
        "markers": build_markers(events),
        "heatmap": build_heatmap_points(events),
    }

__all__ = ["heat_intensity", "build_markers", "build_heatmap_points", "map_view"]
