"""Window-to-monitor link facade.

Bundles a DisplayRegistry and a MonitorLinkReconciler for a host: the host
feeds monitors and windows into `registry` and calls `update()` once per
cycle, before its own update logic reads the associations.
"""

import logging
from typing import FrozenSet, Optional

from .models import LinkConfig, LookupStrategy, Monitor
from .logging_setup import apply_log_level
from .registry import DisplayRegistry
from .services.platform_source import PlatformMonitorSource
from .services.reconciler import MonitorLinkReconciler, ReconcileReport

logger = logging.getLogger(__name__)


class MonitorLink:
    """Keeps window -> monitor associations up to date for a host."""

    def __init__(
        self,
        config: Optional[LinkConfig] = None,
        platform_source: Optional[PlatformMonitorSource] = None,
    ):
        self.registry = DisplayRegistry()
        self.reconciler = MonitorLinkReconciler(self.registry, config, platform_source)
        if config is not None:
            apply_log_level(config.log_level)
        self._warn_missing_source()

    @property
    def config(self) -> LinkConfig:
        return self.reconciler.config

    def apply_config(self, config: LinkConfig) -> None:
        """Switch configuration (e.g. from LinkConfigWatcher), including the root log level."""
        apply_log_level(config.log_level)
        self.reconciler.apply_config(config)
        self._warn_missing_source()

    def attach_platform_source(self, source: Optional[PlatformMonitorSource]) -> None:
        """Replace the live lookup; the next cycle revisits every window."""
        self.reconciler.platform_source = source
        for window in self.registry.windows():
            self.registry.changes.mark_window(window.window_id)

    def update(self) -> ReconcileReport:
        """Run one reconciliation cycle."""
        return self.reconciler.run_cycle()

    def monitor_for(self, window_id: int) -> Optional[Monitor]:
        """Monitor entity a window is linked to, if any."""
        monitor_id = self.registry.associations.monitor_of(window_id)
        if monitor_id is None:
            return None
        return self.registry.get_monitor(monitor_id)

    def windows_on(self, monitor_id: int) -> FrozenSet[int]:
        return self.registry.associations.windows_on(monitor_id)

    def _warn_missing_source(self) -> None:
        if self.config.strategy == LookupStrategy.PLATFORM and self.reconciler.platform_source is None:
            logger.warning(
                "Lookup strategy is 'platform' but no platform source is attached; "
                "windows will not be linked"
            )
