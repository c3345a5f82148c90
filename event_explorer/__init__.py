"""Top-level package for the event-explorer project.

Exposes the Flask app factory so callers can do
`python -m event_explorer` or `from event_explorer import create_app`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("event-explorer")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .api.app import create_app  # convenience re-export

__all__ = ["create_app", "__version__"]
