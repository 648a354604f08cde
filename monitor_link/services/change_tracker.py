"""
Dirty-set change tracking for windows and monitors.

The registry marks entities as they change; the reconciler drains the set
once per cycle so it only visits what actually changed.
"""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Set

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeSet:
    """Entities changed since the previous drain.

    Attributes:
        windows: Windows added or whose placement changed
        monitors_changed: True if any monitor was added, updated or removed
    """
    windows: FrozenSet[int] = field(default_factory=frozenset)
    monitors_changed: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.windows and not self.monitors_changed


class ChangeTracker:
    """Tracks which windows and monitors changed since the last check."""

    def __init__(self) -> None:
        self._windows: Set[int] = set()
        self._monitors: Set[int] = set()

    def mark_window(self, window_id: int) -> None:
        self._windows.add(window_id)

    def mark_monitor(self, monitor_id: int) -> None:
        self._monitors.add(monitor_id)

    def forget_window(self, window_id: int) -> None:
        """Drop a pending mark for a destroyed window."""
        self._windows.discard(window_id)

    @property
    def pending(self) -> bool:
        return bool(self._windows or self._monitors)

    def drain(self) -> ChangeSet:
        """Return pending changes and reset the dirty state."""
        changes = ChangeSet(
            windows=frozenset(self._windows),
            monitors_changed=bool(self._monitors),
        )
        if not changes.is_empty:
            logger.debug(
                f"Drained changes: {len(self._windows)} window(s), "
                f"{len(self._monitors)} monitor(s)"
            )
        self._windows.clear()
        self._monitors.clear()
        return changes
