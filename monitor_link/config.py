"""Configuration loader for monitor-link.

Handles loading, saving and live-reloading LinkConfig from a JSON file.
"""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .constants import ConfigPaths
from .errors import LinkConfigError
from .models import LinkConfig

logger = logging.getLogger(__name__)


def load_link_config(config_file: Optional[Path] = None) -> LinkConfig:
    """Load link configuration from a JSON file.

    Args:
        config_file: Path to config.json (defaults to ConfigPaths.config_file())

    Returns:
        LinkConfig with environment overrides applied; defaults if the file
        does not exist

    Raises:
        LinkConfigError: If the file is not valid JSON or holds invalid values
    """
    path = config_file or ConfigPaths.config_file()

    if not path.exists():
        logger.info(f"Config file does not exist: {path}, using defaults")
        return LinkConfig().with_environment()

    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise LinkConfigError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise LinkConfigError(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise LinkConfigError(f"Expected a JSON object in {path}, got {type(data).__name__}")

    try:
        config = LinkConfig.model_validate(data).with_environment()
    except ValidationError as e:
        raise LinkConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info(f"Loaded config from {path}: strategy={config.strategy.value}")
    return config


def save_link_config(config: LinkConfig, config_file: Optional[Path] = None) -> None:
    """Save link configuration to a JSON file (atomic write).

    Uses temp file + rename pattern to prevent corruption.

    Args:
        config: LinkConfig to save
        config_file: Destination path (defaults to ConfigPaths.config_file())
    """
    path = config_file or ConfigPaths.config_file()
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=".config-", suffix=".json")
    try:
        with os.fdopen(fd, "w") as f:
            json.dump(config.model_dump(mode="json"), f, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.rename(temp_path, path)
        logger.info(f"Saved config to {path}")
    except Exception:
        if Path(temp_path).exists():
            os.unlink(temp_path)
        raise


def reload_link_config(config_file: Path, previous: Optional[LinkConfig] = None) -> LinkConfig:
    """Reload link configuration, retaining the previous config on error.

    Args:
        config_file: Path to config.json
        previous: Currently active config (retained on error if provided)

    Returns:
        Reloaded LinkConfig, or previous (defaults if None) on error
    """
    try:
        config = load_link_config(config_file)
        logger.info(f"Reloaded config from {config_file}")
        return config
    except LinkConfigError as e:
        logger.error(f"Failed to reload config: {e}")
        if previous is not None:
            logger.warning("Retaining previous configuration")
            return previous
        logger.warning("No previous configuration to retain, using defaults")
        return LinkConfig()


class ConfigFileHandler(FileSystemEventHandler):
    """Watchdog handler that reloads one config file after a quiet period.

    Editors save in bursts (write, chmod, rename), so each matching event
    restarts the delay and only the last one triggers the callback. The
    delay tracks LinkConfig.reload_debounce_ms and can change between reloads.
    """

    RELOAD_EVENTS = frozenset({"modified", "created", "moved"})

    def __init__(self, filename: str, callback: Callable[[], None], debounce_ms: int):
        super().__init__()
        self.filename = filename
        self.callback = callback
        self.debounce_ms = debounce_ms
        self._pending: Optional[asyncio.Task] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000

    def set_event_loop(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type not in self.RELOAD_EVENTS:
            return
        # Atomic saves show up as a move onto the config filename
        path = getattr(event, "dest_path", "") or event.src_path
        if Path(path).name != self.filename:
            return

        if self._loop is None:
            self.callback()
            return
        # Watchdog delivers events on its observer thread
        self._loop.call_soon_threadsafe(self._restart_delay)

    def cancel_pending(self) -> bool:
        """Drop a scheduled reload; True if one was pending."""
        if self._pending is None or self._pending.done():
            return False
        self._pending.cancel()
        return True

    def _restart_delay(self) -> None:
        self.cancel_pending()
        self._pending = self._loop.create_task(self._reload_after_delay())

    async def _reload_after_delay(self) -> None:
        try:
            await asyncio.sleep(self.debounce_seconds)
        except asyncio.CancelledError:
            logger.debug(f"Reload of {self.filename} superseded or cancelled")
            return
        self.callback()


class LinkConfigWatcher:
    """Reloads config.json when it changes and hands the result to on_reload.

    The reload delay comes from the active config's reload_debounce_ms and is
    updated whenever a reload changes it. The parent directory is watched so
    editors that replace the file are seen.
    """

    def __init__(self,
                 config_file: Path,
                 on_reload: Callable[[LinkConfig], None],
                 current: Optional[LinkConfig] = None):
        """Initialize config file watcher.

        Args:
            config_file: Path to config.json
            on_reload: Called with each reloaded config
            current: Active config (defaults if None); kept when a reload fails
        """
        self.config_file = config_file
        self.on_reload = on_reload
        self.current = current or LinkConfig()
        self.handler = ConfigFileHandler(
            config_file.name, self._reload, self.current.reload_debounce_ms
        )
        self.observer = Observer()
        self._started = False

    def set_event_loop(self, loop: asyncio.AbstractEventLoop) -> None:
        self.handler.set_event_loop(loop)

    def _reload(self) -> None:
        config = reload_link_config(self.config_file, self.current)
        if config.reload_debounce_ms != self.handler.debounce_ms:
            logger.info(
                f"Reload debounce changed: {self.handler.debounce_ms}ms -> "
                f"{config.reload_debounce_ms}ms"
            )
            self.handler.debounce_ms = config.reload_debounce_ms
        self.current = config
        self.on_reload(config)

    def start(self) -> None:
        if self._started:
            logger.warning("Config watcher already started")
            return

        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        self.observer.schedule(self.handler, str(self.config_file.parent), recursive=False)
        self.observer.start()
        self._started = True
        logger.info(
            f"Watching {self.config_file} (debounce {self.handler.debounce_ms}ms)"
        )

    def stop(self) -> None:
        """Stop watching and drop any reload still waiting on its delay."""
        if self.handler.cancel_pending():
            logger.debug("Cancelled pending config reload")
        if not self._started:
            return

        self.observer.stop()
        self.observer.join(timeout=5.0)
        self._started = False
        logger.info(f"Stopped watching {self.config_file}")
