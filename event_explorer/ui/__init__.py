"""Client-side presentation state: API client, search state, map layers and discovery flow."""

from .api_client import ExplorerAPIClient  # noqa: F401
from .discovery_flow import DiscoveryFlow, FlowStatus  # noqa: F401
from .fallback import scan_dataset  # noqa: F401
from .map_layers import build_heatmap_points, build_markers, map_view  # noqa: F401
from .scheduler import TimerScheduler  # noqa: F401
from .state import ExplorerState, run_search  # noqa: F401

__all__ = [
    "ExplorerAPIClient",
    "DiscoveryFlow",
    "FlowStatus",
    "scan_dataset",
    "build_heatmap_points",
    "build_markers",
    "map_view",
    "TimerScheduler",
    "ExplorerState",
    "run_search",
]
