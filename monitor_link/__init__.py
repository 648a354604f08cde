"""Window-to-monitor link

Keeps a best-effort association between every on-screen window and the
physical monitor it occupies.

This package provides:
- A pure heuristic that resolves a window's placement to a monitor
- A per-cycle reconciler that keeps window -> monitor links current
- A bidirectional association store (OnMonitor / HasWindows)
- An optional sway/i3 platform source for live monitor lookups

License: MIT
Version: 0.2.0
"""

__version__ = "0.2.0"

from .association import AssociationChange, MonitorAssociations
from .link import MonitorLink
from .models import (
    IVec2,
    LinkConfig,
    Monitor,
    MonitorSelection,
    PlatformMonitor,
    Window,
    WindowPosition,
)
from .registry import DisplayRegistry
from .services.monitor_resolver import resolve_monitor
from .services.reconciler import MonitorLinkReconciler, ReconcileReport

__all__ = [
    "AssociationChange",
    "DisplayRegistry",
    "IVec2",
    "LinkConfig",
    "Monitor",
    "MonitorAssociations",
    "MonitorLink",
    "MonitorLinkReconciler",
    "MonitorSelection",
    "PlatformMonitor",
    "ReconcileReport",
    "Window",
    "WindowPosition",
    "resolve_monitor",
]
