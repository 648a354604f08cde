"""Exceptions raised by the window-to-monitor link.

Resolution and reconciliation never raise: an undeterminable monitor is a
None result. These cover the configuration boundary only.
"""


class MonitorLinkError(Exception):
    """Base exception for monitor-link errors."""
    pass


class LinkConfigError(MonitorLinkError, ValueError):
    """Configuration file could not be read or is invalid."""
    pass
