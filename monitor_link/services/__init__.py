"""
Services for the window-to-monitor link.

- monitor_resolver: pure placement -> monitor heuristic
- reconciler: per-cycle association updates
- change_tracker: dirty-set change detection
- platform_source: live monitor lookups (sway/i3 over IPC)
"""

from .change_tracker import ChangeSet, ChangeTracker
from .monitor_resolver import resolve_monitor
from .platform_source import (
    MonitorIdMap,
    PlatformMonitorSource,
    StaticPlatformSource,
    SwayPlatformSource,
    monitors_from_outputs,
    window_from_con,
)
from .reconciler import MonitorLinkReconciler, ReconcileReport

__all__ = [
    "ChangeSet",
    "ChangeTracker",
    "resolve_monitor",
    "MonitorIdMap",
    "PlatformMonitorSource",
    "StaticPlatformSource",
    "SwayPlatformSource",
    "monitors_from_outputs",
    "window_from_con",
    "MonitorLinkReconciler",
    "ReconcileReport",
]
