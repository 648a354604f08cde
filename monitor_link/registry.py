"""Display registry: windows, monitors and their associations.

Holds the entity state the host's windowing layer feeds in, tracks what
changed between reconciliation cycles, and owns the association store so
that destroying a window or monitor never leaves a dangling link.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .association import MonitorAssociations
from .models import Monitor, Window, WindowPosition
from .services.change_tracker import ChangeSet, ChangeTracker

logger = logging.getLogger(__name__)


class DisplayRegistry:
    """Registry of monitors and windows with change tracking."""

    def __init__(self) -> None:
        """Initialize registry with no entities."""
        self._monitors: Dict[int, Monitor] = {}
        self._windows: Dict[int, Window] = {}
        self.associations = MonitorAssociations()
        self.changes = ChangeTracker()

    # ------------------------------------------------------------------
    # Monitors
    # ------------------------------------------------------------------

    def upsert_monitor(self, monitor: Monitor) -> bool:
        """Add a monitor or replace its stored state.

        Args:
            monitor: Monitor snapshot from the windowing subsystem

        Returns:
            True if the stored state changed
        """
        previous = self._monitors.get(monitor.monitor_id)
        if previous == monitor:
            return False

        self._monitors[monitor.monitor_id] = monitor
        self.changes.mark_monitor(monitor.monitor_id)

        if previous is None:
            logger.info(
                f"Added monitor {monitor.monitor_id} ({monitor.name}) at "
                f"{monitor.physical_position} size {monitor.physical_size}"
                f"{' [primary]' if monitor.is_primary else ''}"
            )
        else:
            logger.debug(f"Updated monitor {monitor.monitor_id} ({monitor.name})")
        return True

    def remove_monitor(self, monitor_id: int) -> Optional[Monitor]:
        """Remove a monitor and every association pointing at it.

        Args:
            monitor_id: Monitor to remove

        Returns:
            The removed monitor, or None if it was unknown
        """
        monitor = self._monitors.pop(monitor_id, None)
        if monitor is None:
            logger.warning(f"Attempted to remove non-existent monitor {monitor_id}")
            return None

        orphaned = self.associations.forget_monitor(monitor_id)
        self.changes.mark_monitor(monitor_id)
        logger.info(
            f"Removed monitor {monitor_id} ({monitor.name}), "
            f"{len(orphaned)} window(s) unlinked"
        )
        return monitor

    def sync_monitors(self, monitors: Iterable[Monitor]) -> bool:
        """Replace the monitor set with a fresh enumeration.

        Monitors present in `monitors` are upserted, missing ones removed.

        Returns:
            True if anything changed
        """
        current = list(monitors)
        changed = False
        for monitor in current:
            changed = self.upsert_monitor(monitor) or changed

        present = {m.monitor_id for m in current}
        for monitor_id in [mid for mid in self._monitors if mid not in present]:
            self.remove_monitor(monitor_id)
            changed = True
        return changed

    def get_monitor(self, monitor_id: int) -> Optional[Monitor]:
        return self._monitors.get(monitor_id)

    def monitors(self) -> List[Monitor]:
        """Monitors in registration order."""
        return list(self._monitors.values())

    def primary_monitor(self) -> Optional[Monitor]:
        """First primary-flagged monitor in registration order."""
        return next((m for m in self._monitors.values() if m.is_primary), None)

    # ------------------------------------------------------------------
    # Windows
    # ------------------------------------------------------------------

    def upsert_window(self, window: Window) -> bool:
        """Add a window or replace its stored state.

        Returns:
            True if the stored state changed
        """
        previous = self._windows.get(window.window_id)
        if previous == window:
            return False

        self._windows[window.window_id] = window
        if previous is None or previous.position != window.position:
            self.changes.mark_window(window.window_id)

        if previous is None:
            logger.debug(f"Added window {window.label} placed {window.position}")
        return True

    def set_window_position(self, window_id: int, position: WindowPosition) -> bool:
        """Update the placement descriptor of a tracked window.

        Returns:
            True if the placement changed
        """
        window = self._windows.get(window_id)
        if window is None:
            logger.warning(f"Attempted to update non-existent window {window_id}")
            return False
        return self.upsert_window(window.with_position(position))

    def remove_window(self, window_id: int) -> Optional[Window]:
        """Remove a window and its association.

        Returns:
            The removed window, or None if it was unknown
        """
        window = self._windows.pop(window_id, None)
        if window is None:
            logger.warning(f"Attempted to remove non-existent window {window_id}")
            return None

        self.associations.unlink(window_id)
        self.changes.forget_window(window_id)
        logger.debug(f"Removed window {window.label}")
        return window

    def get_window(self, window_id: int) -> Optional[Window]:
        return self._windows.get(window_id)

    def windows(self) -> List[Window]:
        """Windows in registration order."""
        return list(self._windows.values())

    # ------------------------------------------------------------------
    # Change tracking
    # ------------------------------------------------------------------

    def take_changes(self) -> ChangeSet:
        """Drain changes accumulated since the previous cycle."""
        return self.changes.drain()

    def __repr__(self) -> str:
        return (
            f"DisplayRegistry(monitors={len(self._monitors)}, "
            f"windows={len(self._windows)}, links={len(self.associations)})"
        )
