"""Window placement descriptors.

Mirrors the positioning intent a window declares to the windowing subsystem:

- AUTOMATIC: position not yet decided
- AT: explicit top-left corner in the virtual-screen space
- CENTERED: centered on a monitor picked by a MonitorSelection
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .geometry import IVec2


class SelectionKind(str, Enum):
    """Ways a centered window can pick its monitor."""
    CURRENT = "current"
    INDEX = "index"
    PRIMARY = "primary"
    ENTITY = "entity"


class PositionKind(str, Enum):
    """Placement descriptor variants."""
    AUTOMATIC = "automatic"
    AT = "at"
    CENTERED = "centered"


class MonitorSelection(BaseModel):
    """Monitor selection for centered windows.

    Only INDEX carries `index` and only ENTITY carries `entity`.
    """

    model_config = ConfigDict(frozen=True)

    kind: SelectionKind
    index: Optional[int] = Field(None, ge=0, description="Ordinal for INDEX")
    entity: Optional[int] = Field(None, description="Monitor reference for ENTITY")

    @model_validator(mode="after")
    def validate_payload(self) -> "MonitorSelection":
        if self.kind == SelectionKind.INDEX and self.index is None:
            raise ValueError("INDEX selection requires an index")
        if self.kind == SelectionKind.ENTITY and self.entity is None:
            raise ValueError("ENTITY selection requires a monitor reference")
        if self.kind != SelectionKind.INDEX and self.index is not None:
            raise ValueError(f"{self.kind.value} selection does not take an index")
        if self.kind != SelectionKind.ENTITY and self.entity is not None:
            raise ValueError(f"{self.kind.value} selection does not take a monitor reference")
        return self

    @classmethod
    def current(cls) -> "MonitorSelection":
        return cls(kind=SelectionKind.CURRENT)

    @classmethod
    def primary(cls) -> "MonitorSelection":
        return cls(kind=SelectionKind.PRIMARY)

    @classmethod
    def at_index(cls, index: int) -> "MonitorSelection":
        return cls(kind=SelectionKind.INDEX, index=index)

    @classmethod
    def for_entity(cls, monitor_id: int) -> "MonitorSelection":
        return cls(kind=SelectionKind.ENTITY, entity=monitor_id)


class WindowPosition(BaseModel):
    """Placement descriptor of a window.

    Examples:
        >>> WindowPosition.automatic()
        >>> WindowPosition.at(2500, 300)
        >>> WindowPosition.centered(MonitorSelection.primary())
    """

    model_config = ConfigDict(frozen=True)

    kind: PositionKind = PositionKind.AUTOMATIC
    point: Optional[IVec2] = Field(None, description="Top-left corner for AT")
    selection: Optional[MonitorSelection] = Field(None, description="Target for CENTERED")

    @model_validator(mode="after")
    def validate_payload(self) -> "WindowPosition":
        if self.kind == PositionKind.AT and self.point is None:
            raise ValueError("AT placement requires a point")
        if self.kind == PositionKind.CENTERED and self.selection is None:
            raise ValueError("CENTERED placement requires a monitor selection")
        if self.kind != PositionKind.AT and self.point is not None:
            raise ValueError(f"{self.kind.value} placement does not take a point")
        if self.kind != PositionKind.CENTERED and self.selection is not None:
            raise ValueError(f"{self.kind.value} placement does not take a selection")
        return self

    @classmethod
    def automatic(cls) -> "WindowPosition":
        return cls(kind=PositionKind.AUTOMATIC)

    @classmethod
    def at(cls, x: int, y: int) -> "WindowPosition":
        return cls(kind=PositionKind.AT, point=IVec2(x=x, y=y))

    @classmethod
    def centered(cls, selection: MonitorSelection) -> "WindowPosition":
        return cls(kind=PositionKind.CENTERED, selection=selection)

    def __str__(self) -> str:
        if self.kind == PositionKind.AT:
            return f"at{self.point}"
        if self.kind == PositionKind.CENTERED:
            if self.selection.kind == SelectionKind.INDEX:
                return f"centered(index={self.selection.index})"
            if self.selection.kind == SelectionKind.ENTITY:
                return f"centered(monitor={self.selection.entity})"
            return f"centered({self.selection.kind.value})"
        return "automatic"
