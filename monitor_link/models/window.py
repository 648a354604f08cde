"""Window model tracked by the registry."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .placement import WindowPosition


class Window(BaseModel):
    """Application window as seen by the link.

    Only `position` is read when resolving monitors; `title` is carried for
    log messages.
    """

    model_config = ConfigDict(frozen=True)

    window_id: int = Field(..., description="Stable window reference")
    position: WindowPosition = Field(default_factory=WindowPosition.automatic)
    title: Optional[str] = Field(None, description="Window title (diagnostics only)")

    def with_position(self, position: WindowPosition) -> "Window":
        """Copy of this window with a new placement descriptor."""
        return self.model_copy(update={"position": position})

    @property
    def label(self) -> str:
        """Short description for log messages."""
        if self.title:
            return f"{self.window_id} ({self.title})"
        return str(self.window_id)
