"""
Window -> monitor reconciliation.

Runs once per update cycle. Visits the windows whose placement changed (or
every window when the monitor set changed), determines each window's monitor
and creates, replaces or removes its association to match.

Per-window steps:
1. Look up the monitor (platform source or placement heuristic)
2. No monitor: remove the association if one exists
3. Match the result to a registered monitor entity; defer if none matches
4. Link when the match differs from the current association
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

from ..association import AssociationChange
from ..models import LinkConfig, LookupStrategy, Monitor, PlatformMonitor, Window
from .monitor_resolver import resolve_monitor
from .platform_source import PlatformMonitorSource

if TYPE_CHECKING:
    from ..registry import DisplayRegistry

logger = logging.getLogger(__name__)


@dataclass
class ReconcileReport:
    """Outcome of one reconciliation cycle (window ids per outcome)."""
    visited: List[int] = field(default_factory=list)
    linked: List[int] = field(default_factory=list)
    relinked: List[int] = field(default_factory=list)
    unlinked: List[int] = field(default_factory=list)
    deferred: List[int] = field(default_factory=list)
    unchanged: List[int] = field(default_factory=list)

    @property
    def mutations(self) -> int:
        """Number of association writes performed."""
        return len(self.linked) + len(self.relinked) + len(self.unlinked)

    def summary(self) -> str:
        return (
            f"visited={len(self.visited)} linked={len(self.linked)} "
            f"relinked={len(self.relinked)} unlinked={len(self.unlinked)} "
            f"deferred={len(self.deferred)}"
        )


class MonitorLinkReconciler:
    """Keeps registry associations in line with where windows are.

    Example:
        >>> reconciler = MonitorLinkReconciler(registry)
        >>> report = reconciler.run_cycle()
        >>> registry.associations.monitor_of(window_id)
        2
    """

    def __init__(
        self,
        registry: DisplayRegistry,
        config: Optional[LinkConfig] = None,
        platform_source: Optional[PlatformMonitorSource] = None,
    ):
        """Initialize the reconciler.

        Args:
            registry: Registry holding windows, monitors and associations
            config: Link configuration (defaults if None)
            platform_source: Live monitor lookup, if the host has one
        """
        self.registry = registry
        self.config = config or LinkConfig()
        self.platform_source = platform_source
        self.cycles = 0

    def apply_config(self, config: LinkConfig) -> None:
        """Switch to a new configuration; the next cycle revisits every window."""
        if config.strategy != self.config.strategy:
            logger.info(f"Lookup strategy changed: {self.config.strategy.value} -> {config.strategy.value}")
        self.config = config
        for window in self.registry.windows():
            self.registry.changes.mark_window(window.window_id)

    def run_cycle(self, full: bool = False) -> ReconcileReport:
        """Reconcile associations for changed windows.

        Args:
            full: Visit every window regardless of change flags

        Returns:
            ReconcileReport describing what was done
        """
        self.cycles += 1
        report = ReconcileReport()
        changes = self.registry.take_changes()

        if full or changes.monitors_changed:
            windows = self.registry.windows()
        else:
            windows = [
                w for w in self.registry.windows()
                if w.window_id in changes.windows
            ]

        if not windows:
            return report

        monitors = self.registry.monitors()
        for window in windows:
            report.visited.append(window.window_id)
            self._reconcile_window(window, monitors, report)

        if report.mutations or report.deferred:
            logger.debug(f"Reconcile cycle {self.cycles}: {report.summary()}")
        return report

    def _reconcile_window(
        self,
        window: Window,
        monitors: List[Monitor],
        report: ReconcileReport,
    ) -> None:
        associations = self.registry.associations
        window_id = window.window_id
        found, match = self._lookup(window, monitors)

        if not found:
            if associations.unlink(window_id) is not None:
                report.unlinked.append(window_id)
            else:
                report.unchanged.append(window_id)
            return

        if match is None:
            # Entity not registered yet; keep the current link until it appears
            report.deferred.append(window_id)
            return

        change = associations.link(window_id, match.monitor_id)
        if change == AssociationChange.LINKED:
            report.linked.append(window_id)
        elif change == AssociationChange.RELINKED:
            report.relinked.append(window_id)
        else:
            report.unchanged.append(window_id)

    def _lookup(self, window: Window, monitors: List[Monitor]) -> Tuple[bool, Optional[Monitor]]:
        """Determine a window's monitor.

        Returns:
            (found, match): found is False when the window is on no
            determinable monitor; match is None when a monitor was found but
            no registered entity corresponds to it
        """
        if self._use_platform(window.window_id):
            reported = self.platform_source.current_monitor(window.window_id)
            if reported is None:
                return False, None
            return True, self._match_platform_monitor(window, reported, monitors)

        if self.config.strategy == LookupStrategy.PLATFORM:
            # No platform window behind this entity: not on any monitor
            return False, None

        resolved = resolve_monitor(window.position, monitors)
        if resolved is None:
            return False, None
        match = self.registry.get_monitor(resolved.monitor_id)
        if match is None:
            logger.debug(
                f"Window {window.label} resolved to unregistered monitor "
                f"{resolved.monitor_id} ({resolved.name}), deferring"
            )
        return True, match

    def _use_platform(self, window_id: int) -> bool:
        strategy = self.config.strategy
        if strategy == LookupStrategy.HEURISTIC or self.platform_source is None:
            return False
        if strategy == LookupStrategy.PLATFORM:
            return True
        return self.platform_source.tracks(window_id)

    @staticmethod
    def _match_platform_monitor(
        window: Window,
        reported: PlatformMonitor,
        monitors: List[Monitor],
    ) -> Optional[Monitor]:
        for monitor in monitors:
            if monitor.matches(reported):
                return monitor
        logger.debug(
            f"Window {window.label} reported on {reported.name} at {reported.position}, "
            f"no matching monitor entity yet; deferring"
        )
        return None
