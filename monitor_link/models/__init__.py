"""
Pydantic models for the window-to-monitor link.

- geometry: IVec2 points and extents
- monitor: Monitor entities and platform-reported monitors
- placement: WindowPosition / MonitorSelection descriptors
- window: tracked windows
- config: LinkConfig runtime settings
"""

from .geometry import IVec2
from .monitor import Monitor, PlatformMonitor
from .placement import (
    MonitorSelection,
    PositionKind,
    SelectionKind,
    WindowPosition,
)
from .window import Window
from .config import LinkConfig, LookupStrategy, normalize_log_level

__all__ = [
    "IVec2",
    "Monitor",
    "PlatformMonitor",
    "MonitorSelection",
    "PositionKind",
    "SelectionKind",
    "WindowPosition",
    "Window",
    "LinkConfig",
    "LookupStrategy",
    "normalize_log_level",
]
