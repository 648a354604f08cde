"""Link configuration model.

Loaded from ~/.config/monitor-link/config.json (see config.load_link_config).
"""

import os
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LookupStrategy(str, Enum):
    """Where the reconciler gets a window's monitor from.

    - PLATFORM: ask the live platform source only
    - HEURISTIC: resolve from the placement descriptor only
    - AUTO: platform source when it tracks the window, heuristic otherwise
    """
    AUTO = "auto"
    PLATFORM = "platform"
    HEURISTIC = "heuristic"


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def normalize_log_level(value: str) -> str:
    """Upper-case a log level name; ValueError if it is not a known level."""
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(
            f"Invalid log level '{value}': must be one of {', '.join(sorted(_LOG_LEVELS))}"
        )
    return level


class LinkConfig(BaseModel):
    """Runtime settings for the window-to-monitor link."""

    strategy: LookupStrategy = Field(LookupStrategy.AUTO, description="Monitor lookup strategy")
    log_level: str = Field("INFO", description="Root log level")
    reload_debounce_ms: int = Field(100, ge=0, le=5000, description="Config reload debounce (ms)")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return normalize_log_level(v)

    @field_validator("strategy", mode="before")
    @classmethod
    def normalize_strategy(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    def with_environment(self) -> "LinkConfig":
        """Apply MONITOR_LINK_STRATEGY / LOG_LEVEL overrides."""
        overrides = {}
        if os.getenv("MONITOR_LINK_STRATEGY"):
            overrides["strategy"] = os.environ["MONITOR_LINK_STRATEGY"]
        if os.getenv("LOG_LEVEL"):
            overrides["log_level"] = os.environ["LOG_LEVEL"]
        if not overrides:
            return self
        return LinkConfig.model_validate({**self.model_dump(), **overrides})
