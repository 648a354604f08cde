"""Configuration paths and constants for monitor-link.

Single source of truth for file locations and environment variable names.
"""

import os
from pathlib import Path
from typing import Final


class ConfigPaths:
    """Centralized configuration paths.

    Example:
        from .constants import ConfigPaths

        config = load_link_config(ConfigPaths.config_file())
    """

    HOME: Final[Path] = Path.home()
    CONFIG_DIR: Final[Path] = HOME / ".config" / "monitor-link"
    CONFIG_FILE: Final[Path] = CONFIG_DIR / "config.json"

    @classmethod
    def config_file(cls) -> Path:
        """Config file path, honouring MONITOR_LINK_CONFIG."""
        override = os.getenv(CONFIG_ENV_VAR)
        return Path(override).expanduser() if override else cls.CONFIG_FILE


CONFIG_ENV_VAR: Final[str] = "MONITOR_LINK_CONFIG"
LOG_IDENTIFIER: Final[str] = "monitor-link"
LOG_FORMAT: Final[str] = "%(levelname)s [%(name)s] %(message)s"
