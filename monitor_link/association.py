"""Window -> monitor association store (OnMonitor / HasWindows).

Each window holds at most one monitor reference; each monitor tracks the set
of windows referencing it. Both sides change together through link(),
unlink() and forget_monitor(), so a window referencing monitor M is always in
M's window set and no reverse entry outlives its forward link.
"""

import logging
from enum import Enum
from typing import Dict, FrozenSet, Iterator, Optional, Set, Tuple

logger = logging.getLogger(__name__)


class AssociationChange(str, Enum):
    """Outcome of a link() call."""
    LINKED = "linked"
    RELINKED = "relinked"
    UNCHANGED = "unchanged"


class MonitorAssociations:
    """Bidirectional many-to-one link between windows and monitors.

    Example:
        >>> links = MonitorAssociations()
        >>> links.link(window_id=10, monitor_id=1)
        <AssociationChange.LINKED: 'linked'>
        >>> links.windows_on(1)
        frozenset({10})
    """

    def __init__(self) -> None:
        self._on_monitor: Dict[int, int] = {}
        self._has_windows: Dict[int, Set[int]] = {}

    def link(self, window_id: int, monitor_id: int) -> AssociationChange:
        """Create or replace the association of a window.

        Args:
            window_id: Window to link
            monitor_id: Monitor the window is on

        Returns:
            LINKED if the window had no monitor, RELINKED if it moved,
            UNCHANGED if it was already on monitor_id
        """
        previous = self._on_monitor.get(window_id)
        if previous == monitor_id:
            return AssociationChange.UNCHANGED

        if previous is not None:
            self._drop_reverse(previous, window_id)

        self._on_monitor[window_id] = monitor_id
        self._has_windows.setdefault(monitor_id, set()).add(window_id)

        if previous is None:
            logger.debug(f"Linked window {window_id} to monitor {monitor_id}")
            return AssociationChange.LINKED

        logger.debug(f"Relinked window {window_id}: monitor {previous} -> {monitor_id}")
        return AssociationChange.RELINKED

    def unlink(self, window_id: int) -> Optional[int]:
        """Remove the association of a window.

        Returns:
            The monitor the window was linked to, or None if it had none
        """
        previous = self._on_monitor.pop(window_id, None)
        if previous is not None:
            self._drop_reverse(previous, window_id)
            logger.debug(f"Unlinked window {window_id} from monitor {previous}")
        return previous

    def forget_monitor(self, monitor_id: int) -> Set[int]:
        """Drop every association pointing at a monitor.

        Returns:
            Window ids that lost their association
        """
        windows = self._has_windows.pop(monitor_id, set())
        for window_id in windows:
            del self._on_monitor[window_id]
        if windows:
            logger.debug(
                f"Monitor {monitor_id} removed, unlinked {len(windows)} window(s): "
                f"{sorted(windows)}"
            )
        return windows

    def monitor_of(self, window_id: int) -> Optional[int]:
        """Monitor a window is linked to, if any."""
        return self._on_monitor.get(window_id)

    def windows_on(self, monitor_id: int) -> FrozenSet[int]:
        """Windows linked to a monitor (empty for unknown monitors)."""
        return frozenset(self._has_windows.get(monitor_id, ()))

    def monitors(self) -> FrozenSet[int]:
        """Monitors with at least one linked window."""
        return frozenset(self._has_windows)

    def items(self) -> Iterator[Tuple[int, int]]:
        """Iterate (window_id, monitor_id) pairs."""
        return iter(list(self._on_monitor.items()))

    def snapshot(self) -> Dict[int, int]:
        """Plain copy of the window -> monitor mapping."""
        return dict(self._on_monitor)

    def _drop_reverse(self, monitor_id: int, window_id: int) -> None:
        windows = self._has_windows.get(monitor_id)
        if windows is None:
            return
        windows.discard(window_id)
        if not windows:
            del self._has_windows[monitor_id]

    def __contains__(self, window_id: object) -> bool:
        return window_id in self._on_monitor

    def __len__(self) -> int:
        return len(self._on_monitor)

    def __repr__(self) -> str:
        return f"MonitorAssociations({self._on_monitor!r})"
