"""
Unit tests for monitor-link Pydantic models.

Tests cover:
- IVec2 arithmetic
- Monitor bounds, containment and platform matching
- Placement descriptor validation
- LinkConfig validation and environment overrides
"""

import pytest
from pydantic import ValidationError

from monitor_link.models import (
    IVec2,
    LinkConfig,
    LookupStrategy,
    Monitor,
    MonitorSelection,
    PlatformMonitor,
    PositionKind,
    SelectionKind,
    Window,
    WindowPosition,
)


class TestIVec2:

    def test_addition(self):
        assert IVec2.of(1920, 0) + IVec2.of(1920, 1080) == IVec2(x=3840, y=1080)

    def test_is_negative(self):
        assert IVec2.of(-1, 5).is_negative
        assert IVec2.of(5, -1).is_negative
        assert not IVec2.of(0, 0).is_negative

    def test_frozen(self):
        point = IVec2.of(1, 2)
        with pytest.raises(ValidationError):
            point.x = 5


class TestMonitor:

    def test_bounds(self, monitor_b):
        assert monitor_b.bounds() == (IVec2.of(1920, 0), IVec2.of(3840, 1080))

    def test_contains_inclusive(self, monitor_b):
        assert monitor_b.contains(IVec2.of(1920, 0))
        assert monitor_b.contains(IVec2.of(3840, 1080))
        assert not monitor_b.contains(IVec2.of(3841, 1080))
        assert not monitor_b.contains(IVec2.of(1919, 10))

    def test_is_at_origin(self, monitor_a, monitor_b):
        assert monitor_a.is_at_origin
        assert not monitor_b.is_at_origin

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError):
            Monitor(monitor_id=1, name="A", physical_size=IVec2.of(-1, 1080))

    def test_matches_by_name_and_position(self, monitor_b):
        assert monitor_b.matches(PlatformMonitor(name="B", position=IVec2.of(1920, 0)))
        assert not monitor_b.matches(PlatformMonitor(name="B", position=IVec2.of(0, 0)))
        assert not monitor_b.matches(PlatformMonitor(name="A", position=IVec2.of(1920, 0)))


class TestPlacement:

    def test_constructors(self):
        assert WindowPosition.automatic().kind == PositionKind.AUTOMATIC
        at = WindowPosition.at(10, 20)
        assert at.kind == PositionKind.AT and at.point == IVec2.of(10, 20)
        centered = WindowPosition.centered(MonitorSelection.for_entity(3))
        assert centered.selection.kind == SelectionKind.ENTITY
        assert centered.selection.entity == 3

    def test_default_is_automatic(self):
        assert WindowPosition() == WindowPosition.automatic()
        assert Window(window_id=1).position == WindowPosition.automatic()

    def test_at_requires_point(self):
        with pytest.raises(ValidationError):
            WindowPosition(kind=PositionKind.AT)

    def test_centered_requires_selection(self):
        with pytest.raises(ValidationError):
            WindowPosition(kind=PositionKind.CENTERED)

    def test_automatic_rejects_payload(self):
        with pytest.raises(ValidationError):
            WindowPosition(kind=PositionKind.AUTOMATIC, point=IVec2.of(0, 0))

    def test_index_requires_index(self):
        with pytest.raises(ValidationError):
            MonitorSelection(kind=SelectionKind.INDEX)
        with pytest.raises(ValidationError):
            MonitorSelection.at_index(-1)

    def test_entity_requires_reference(self):
        with pytest.raises(ValidationError):
            MonitorSelection(kind=SelectionKind.ENTITY)

    def test_primary_rejects_payload(self):
        with pytest.raises(ValidationError):
            MonitorSelection(kind=SelectionKind.PRIMARY, entity=2)

    def test_from_json(self):
        position = WindowPosition.model_validate(
            {"kind": "centered", "selection": {"kind": "index", "index": 1}}
        )
        assert position == WindowPosition.centered(MonitorSelection.at_index(1))

    def test_str(self):
        assert str(WindowPosition.at(-50, 300)) == "at(-50, 300)"
        assert str(WindowPosition.centered(MonitorSelection.primary())) == "centered(primary)"

    def test_window_with_position(self):
        window = Window(window_id=1, title="term")
        moved = window.with_position(WindowPosition.at(1, 1))
        assert moved.position == WindowPosition.at(1, 1)
        assert window.position == WindowPosition.automatic()
        assert moved.label == "1 (term)"


class TestLinkConfig:

    def test_defaults(self):
        config = LinkConfig()
        assert config.strategy == LookupStrategy.AUTO
        assert config.log_level == "INFO"
        assert config.reload_debounce_ms == 100

    def test_normalization(self):
        config = LinkConfig(strategy=" Heuristic ", log_level="debug")
        assert config.strategy == LookupStrategy.HEURISTIC
        assert config.log_level == "DEBUG"

    def test_invalid_values(self):
        with pytest.raises(ValidationError):
            LinkConfig(strategy="guess")
        with pytest.raises(ValidationError):
            LinkConfig(log_level="LOUD")
        with pytest.raises(ValidationError):
            LinkConfig(reload_debounce_ms=-1)

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("MONITOR_LINK_STRATEGY", "platform")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        config = LinkConfig().with_environment()
        assert config.strategy == LookupStrategy.PLATFORM
        assert config.log_level == "WARNING"

    def test_no_overrides_returns_self(self, monkeypatch):
        monkeypatch.delenv("MONITOR_LINK_STRATEGY", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        config = LinkConfig()
        assert config.with_environment() is config
