"""Pytest configuration and fixtures for monitor-link tests.

Provides monitor layouts, a populated registry and mocked i3ipc objects.
"""

import logging

import pytest
import pytest_asyncio
from types import SimpleNamespace
from typing import List
from unittest.mock import AsyncMock, MagicMock

from monitor_link.models import IVec2, Monitor
from monitor_link.registry import DisplayRegistry


def make_monitor(monitor_id: int, name: str, x: int, y: int,
                 width: int = 1920, height: int = 1080, primary: bool = False) -> Monitor:
    """Build a Monitor with positional geometry."""
    return Monitor(
        monitor_id=monitor_id,
        name=name,
        physical_position=IVec2(x=x, y=y),
        physical_size=IVec2(x=width, y=height),
        is_primary=primary,
    )


@pytest.fixture(autouse=True)
def root_logger():
    """Root logger, with its level and handlers restored after each test."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield root
    root.setLevel(level)
    root.handlers[:] = handlers

@pytest.fixture
def monitor_a() -> Monitor:
    """Monitor A at the origin, flagged primary."""
    return make_monitor(1, "A", 0, 0, primary=True)


@pytest.fixture
def monitor_b() -> Monitor:
    """Monitor B to the right of A."""
    return make_monitor(2, "B", 1920, 0)


@pytest.fixture
def side_by_side(monitor_a, monitor_b) -> List[Monitor]:
    """Two 1920x1080 monitors side by side (A primary at origin)."""
    return [monitor_a, monitor_b]


@pytest.fixture
def registry(side_by_side) -> DisplayRegistry:
    """Registry with the side-by-side layout and changes drained."""
    reg = DisplayRegistry()
    for monitor in side_by_side:
        reg.upsert_monitor(monitor)
    reg.take_changes()
    return reg


def make_rect(x: int, y: int, width: int, height: int) -> SimpleNamespace:
    return SimpleNamespace(x=x, y=y, width=width, height=height)


def make_output(name: str, x: int, y: int, width: int = 1920, height: int = 1080,
                active: bool = True, primary: bool = False) -> MagicMock:
    """Mock i3ipc OutputReply."""
    output = MagicMock()
    output.name = name
    output.active = active
    output.primary = primary
    output.rect = make_rect(x, y, width, height)
    return output


def make_con(con_id: int, con_type: str = "con", name: str = None, nodes=None,
             descendants=None, rect=None, window=None, app_id=None, pid=None) -> MagicMock:
    """Mock i3ipc Con node."""
    con = MagicMock()
    con.id = con_id
    con.type = con_type
    con.name = name
    con.nodes = nodes or []
    con.window = window
    con.app_id = app_id
    con.pid = pid
    con.rect = rect or make_rect(0, 0, 800, 600)
    con.descendants.return_value = descendants or []
    return con


@pytest.fixture
def sway_outputs() -> List[MagicMock]:
    """Outputs for a two-monitor sway session plus an internal output."""
    return [
        make_output("__i3", 0, 0, active=False),
        make_output("eDP-1", 0, 0),
        make_output("HDMI-A-1", 1920, 0),
    ]


@pytest.fixture
def sway_tree() -> MagicMock:
    """Layout tree: one window per output, one scratchpad window."""
    edp_window = make_con(101, app_id="foot", name="terminal")
    hdmi_window = make_con(202, app_id="firefox", name="browser",
                           rect=make_rect(2500, 300, 1000, 800))
    floating = make_con(203, con_type="floating_con", pid=4242, name="pavucontrol")
    scratch = make_con(303, con_type="floating_con", app_id="scratch", name="scratchpad")
    workspace = make_con(9, con_type="workspace", name="1", nodes=[edp_window])

    edp = make_con(2, con_type="output", name="eDP-1", nodes=[workspace],
                   descendants=[workspace, edp_window])
    hdmi = make_con(3, con_type="output", name="HDMI-A-1", nodes=[MagicMock()],
                    descendants=[hdmi_window, floating])
    internal = make_con(1, con_type="output", name="__i3", nodes=[MagicMock()],
                        descendants=[scratch])

    root = make_con(0, con_type="root", name="root")
    root.nodes = [internal, edp, hdmi]
    return root


@pytest_asyncio.fixture
async def mock_i3ipc_connection(sway_outputs, sway_tree):
    """Mock async i3ipc connection for testing.

    Returns:
        AsyncMock: Mocked i3ipc.aio.Connection instance
    """
    connection = AsyncMock()
    connection.get_outputs = AsyncMock(return_value=sway_outputs)
    connection.get_tree = AsyncMock(return_value=sway_tree)

    yield connection


@pytest.fixture
def monitor_factory():
    """Factory for Monitor objects: monitor_factory(id, name, x, y, ...)."""
    return make_monitor


@pytest.fixture
def output_factory():
    """Factory for mock i3ipc outputs."""
    return make_output


@pytest.fixture
def con_factory():
    """Factory for mock i3ipc containers."""
    return make_con
