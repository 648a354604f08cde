"""Integer geometry shared by monitors and window placements."""

from pydantic import BaseModel, ConfigDict, Field


class IVec2(BaseModel):
    """Integer 2D vector in the shared virtual-screen coordinate space.

    Used both for points (top-left corners) and for extents (width/height).
    """

    model_config = ConfigDict(frozen=True)

    x: int = Field(0, description="Horizontal component (pixels)")
    y: int = Field(0, description="Vertical component (pixels)")

    @classmethod
    def of(cls, x: int, y: int) -> "IVec2":
        """Positional constructor: IVec2.of(1920, 0)."""
        return cls(x=x, y=y)

    def __add__(self, other: "IVec2") -> "IVec2":
        return IVec2(x=self.x + other.x, y=self.y + other.y)

    @property
    def is_negative(self) -> bool:
        """True if either component is below zero."""
        return self.x < 0 or self.y < 0

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
