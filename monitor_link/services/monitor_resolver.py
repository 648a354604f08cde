"""
Monitor resolution heuristic.

Maps a window's placement descriptor plus the known monitors to the monitor
the window most likely occupies. Only uses state that is available without
querying the live windowing subsystem, so some placements resolve to None:

- AUTOMATIC: the position is not decided yet
- CENTERED(CURRENT): the current monitor is what is being computed
- CENTERED(INDEX): no stable ordinal -> monitor mapping exists

Ties (overlapping rectangles, several primary flags) go to the first monitor
in the order given.
"""

import logging
from typing import Iterable, Optional

from ..models import IVec2, Monitor, PositionKind, SelectionKind, WindowPosition

logger = logging.getLogger(__name__)


def resolve_monitor(
    position: WindowPosition,
    monitors: Iterable[Monitor],
) -> Optional[Monitor]:
    """Determine which monitor a placement descriptor points at.

    Args:
        position: Window placement descriptor
        monitors: All currently known monitors

    Returns:
        The monitor the window is most likely on, or None if undeterminable

    Examples:
        >>> a = Monitor(monitor_id=1, name="A", physical_size=IVec2.of(1920, 1080))
        >>> b = Monitor(monitor_id=2, name="B", physical_position=IVec2.of(1920, 0),
        ...             physical_size=IVec2.of(1920, 1080))
        >>> resolve_monitor(WindowPosition.at(2500, 300), [a, b]).name
        'B'
    """
    if position.kind == PositionKind.AUTOMATIC:
        return None

    if position.kind == PositionKind.AT:
        return _monitor_at_point(position.point, monitors)

    selection = position.selection
    if selection.kind == SelectionKind.PRIMARY:
        return next((m for m in monitors if m.is_primary), None)
    if selection.kind == SelectionKind.ENTITY:
        return next((m for m in monitors if m.monitor_id == selection.entity), None)

    # CURRENT and INDEX cannot be determined statically
    return None


def _monitor_at_point(point: IVec2, monitors: Iterable[Monitor]) -> Optional[Monitor]:
    """Find the monitor containing a point.

    Windows parked just off the primary display's edge report negative
    coordinates; those fall back to the monitor at (0, 0).
    """
    origin_monitor = None
    for monitor in monitors:
        if origin_monitor is None and monitor.is_at_origin:
            origin_monitor = monitor
        if monitor.contains(point):
            return monitor

    if point.is_negative:
        if origin_monitor is not None:
            logger.debug(
                f"Point {point} outside all monitors, falling back to origin "
                f"monitor {origin_monitor.name}"
            )
        return origin_monitor
    return None
