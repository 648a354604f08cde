"""Monitor models.

Monitors are created and destroyed by the windowing subsystem. The link only
reads them, so both models are immutable after creation (frozen).
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .geometry import IVec2


class Monitor(BaseModel):
    """One physical display known to the windowing subsystem.

    Attributes:
        monitor_id: Stable reference assigned by the host
        name: Output identifier (HDMI-A-1, eDP-1, etc.)
        physical_position: Top-left corner in the virtual-screen space
        physical_size: Width/height in physical pixels
        is_primary: Whether the platform flags this monitor as primary
    """

    model_config = ConfigDict(frozen=True)

    monitor_id: int = Field(..., description="Stable monitor reference")
    name: str = Field(..., description="Output identifier")
    physical_position: IVec2 = Field(default_factory=IVec2, description="Top-left corner")
    physical_size: IVec2 = Field(..., description="Width/height in pixels")
    is_primary: bool = Field(False, description="Primary monitor flag")

    @field_validator("physical_size")
    @classmethod
    def validate_size(cls, v: IVec2) -> IVec2:
        """Reject negative extents."""
        if v.x < 0 or v.y < 0:
            raise ValueError(f"Monitor size cannot be negative: {v}")
        return v

    def bounds(self) -> Tuple[IVec2, IVec2]:
        """Inclusive rectangle [position, position + size]."""
        return (self.physical_position, self.physical_position + self.physical_size)

    def contains(self, point: IVec2) -> bool:
        """Check if point lies within bounds, inclusive on both corners."""
        top_left, bottom_right = self.bounds()
        return (top_left.x <= point.x <= bottom_right.x and
                top_left.y <= point.y <= bottom_right.y)

    @property
    def is_at_origin(self) -> bool:
        """True if the monitor sits exactly at (0, 0)."""
        return self.physical_position.x == 0 and self.physical_position.y == 0

    def matches(self, reported: "PlatformMonitor") -> bool:
        """Check whether a platform-reported monitor refers to this one.

        Matching is by name and physical position; sizes are not compared
        since mode changes are reported before the entity is updated.
        """
        return (self.name == reported.name and
                self.physical_position == reported.position)


class PlatformMonitor(BaseModel):
    """Monitor as reported by the live platform for a given window."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Output identifier reported by the platform")
    position: IVec2 = Field(default_factory=IVec2, description="Reported top-left corner")
