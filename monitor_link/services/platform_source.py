"""
Live platform monitor lookups.

A platform source answers "which monitor does the platform say this window is
on" from in-memory state, so the reconciler can prefer it over the placement
heuristic. SwayPlatformSource captures that state from sway/i3 over IPC once
and then serves synchronous lookups.
"""

from __future__ import annotations

import logging
from typing import (
    TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional, Protocol, runtime_checkable,
)

from ..models import IVec2, Monitor, PlatformMonitor, Window, WindowPosition

if TYPE_CHECKING:
    from i3ipc.aio import Con, Connection

logger = logging.getLogger(__name__)

# Window container types that hold client windows (floating_con is sway-only)
_WINDOW_CON_TYPES = ("con", "floating_con")


@runtime_checkable
class PlatformMonitorSource(Protocol):
    """Synchronous lookup of the monitor a window reports itself on."""

    def tracks(self, window_id: int) -> bool:
        """True if the platform has a window for this id."""
        ...

    def current_monitor(self, window_id: int) -> Optional[PlatformMonitor]:
        """Monitor the window is mapped to, None if unmapped or off-screen."""
        ...


class StaticPlatformSource:
    """Platform source backed by a plain mapping.

    Windows mapped to None are tracked but not on any monitor (minimized,
    unmapped). Windows absent from the mapping are not tracked.
    """

    def __init__(self, placements: Optional[Mapping[int, Optional[PlatformMonitor]]] = None):
        self._placements: Dict[int, Optional[PlatformMonitor]] = dict(placements or {})

    def set(self, window_id: int, monitor: Optional[PlatformMonitor]) -> None:
        self._placements[window_id] = monitor

    def discard(self, window_id: int) -> None:
        self._placements.pop(window_id, None)

    def tracks(self, window_id: int) -> bool:
        return window_id in self._placements

    def current_monitor(self, window_id: int) -> Optional[PlatformMonitor]:
        return self._placements.get(window_id)


class SwayPlatformSource(StaticPlatformSource):
    """Snapshot of sway/i3 window placement captured over IPC.

    Example:
        >>> conn = await i3ipc.aio.Connection().connect()
        >>> source = await SwayPlatformSource.capture(conn)
        >>> source.current_monitor(94558771371136)
        PlatformMonitor(name='HDMI-A-1', position=IVec2(x=1920, y=0))
    """

    def __init__(
        self,
        placements: Optional[Mapping[int, Optional[PlatformMonitor]]] = None,
        outputs: Optional[List[Any]] = None,
    ):
        super().__init__(placements)
        self.outputs = outputs or []

    @classmethod
    async def capture(cls, conn: Connection) -> "SwayPlatformSource":
        """Read outputs and the layout tree from sway/i3.

        Args:
            conn: Connected i3ipc async connection

        Returns:
            Source mapping every window container to the output it sits on
        """
        outputs = [o for o in await conn.get_outputs() if _is_usable_output(o)]
        positions = {o.name: IVec2(x=o.rect.x, y=o.rect.y) for o in outputs}

        tree = await conn.get_tree()
        placements: Dict[int, Optional[PlatformMonitor]] = {}
        for output_con in tree.nodes:
            if output_con.type != "output" or output_con.name not in positions:
                continue
            reported = PlatformMonitor(name=output_con.name, position=positions[output_con.name])
            for con in _window_cons(output_con):
                placements[con.id] = reported

        # Scratchpad windows live under internal outputs: tracked, not on a monitor
        for output_con in tree.nodes:
            if output_con.name and output_con.name.startswith("__"):
                for con in _window_cons(output_con):
                    placements.setdefault(con.id, None)

        logger.debug(
            f"Captured {len(placements)} window(s) across {len(outputs)} output(s): "
            f"{list(positions.keys())}"
        )
        return cls(placements, outputs)


class MonitorIdMap:
    """Stable output name -> monitor id assignment across enumerations."""

    def __init__(self, first_id: int = 1):
        self._ids: Dict[str, int] = {}
        self._next_id = first_id

    def id_for(self, name: str) -> int:
        if name not in self._ids:
            self._ids[name] = self._next_id
            self._next_id += 1
        return self._ids[name]


def monitors_from_outputs(
    outputs: Iterable[Any],
    id_map: MonitorIdMap,
) -> List[Monitor]:
    """Build Monitor snapshots from i3ipc outputs.

    Args:
        outputs: Output replies from get_outputs()
        id_map: Name -> id assignment, shared by every enumeration so a
            replugged output keeps its id

    Returns:
        Monitors for active, non-internal outputs in the order given
    """
    monitors = []
    for output in outputs:
        if not _is_usable_output(output):
            continue
        rect = output.rect
        monitors.append(Monitor(
            monitor_id=id_map.id_for(output.name),
            name=output.name,
            physical_position=IVec2(x=rect.x, y=rect.y),
            physical_size=IVec2(x=rect.width, y=rect.height),
            is_primary=bool(getattr(output, "primary", False)),
        ))
    return monitors


def window_from_con(con: Con) -> Window:
    """Build a Window placed at its container's top-left corner."""
    rect = con.rect
    return Window(
        window_id=con.id,
        position=WindowPosition.at(rect.x, rect.y),
        title=getattr(con, "name", None),
    )


def _is_usable_output(output: Any) -> bool:
    name = getattr(output, "name", None)
    if not name or name.startswith("__"):
        return False
    return bool(getattr(output, "active", False))


def _window_cons(root: Con) -> List[Con]:
    """Leaf containers holding client windows under root."""
    return [
        con for con in root.descendants()
        if not con.nodes and con.type in _WINDOW_CON_TYPES
        and (getattr(con, "window", None) or getattr(con, "app_id", None) or getattr(con, "pid", None))
    ]
