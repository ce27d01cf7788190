"""Picker settings from ~/.config/tvpick/config.json and TVPICK_* variables."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

logger = logging.getLogger("tvpick.config")

CONFIG_FILENAME = "config.json"

_config_cache: Config | None = None


def clear_config_cache() -> None:
    """Forget the config returned by ``Config.load()``."""
    global _config_cache
    _config_cache = None


def get_default_config_dir() -> Path:
    """Get default config directory, respecting TVPICK_CONFIG_DIR env var."""
    config_dir = os.environ.get("TVPICK_CONFIG_DIR")
    if config_dir:
        return Path(config_dir)
    return Path.home() / ".config" / "tvpick"


def _setting(default: Any, description: str) -> Any:
    return field(default=default, metadata={"help": description})


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes", "on"):
        return True
    if lowered in ("false", "0", "no", "off", ""):
        return False
    raise ValueError(f"not a boolean: {value!r}")


def parse_height(value: str) -> int:
    height = int(value)
    if height < 0:
        raise ValueError(f"height must be >= 0, got {height}")
    return height


@dataclass
class Config:
    """Settings for one picker run.

    Values come from the defaults below, then the JSON file, then
    ``TVPICK_<KEY>`` environment variables. ``set`` writes to the file;
    ``override`` only changes this instance (command-line flags).
    """

    inverted: bool = _setting(False, "Draw the list top-down with the prompt above it")
    height: int = _setting(0, "Picker height in rows (0 = full terminal)")
    highlight_style: str = _setting("bold yellow", "Rich style for matched characters")
    selected_style: str = _setting("bold cyan", "Rich style for the selected row")
    marker: str = _setting(">", "Marker shown left of the selected row")
    log_file: str = _setting("", "Debug log file (empty = stderr)")

    config_dir: Path = field(default_factory=get_default_config_dir, repr=False, compare=False)
    _stored: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @staticmethod
    def keys() -> list[str]:
        return [f.name for f in fields(Config) if "help" in f.metadata]

    @staticmethod
    def describe(key: str) -> str:
        return next(f.metadata["help"] for f in fields(Config) if f.name == key)

    @staticmethod
    def parse(key: str, value: str) -> Any:
        """Convert a string from the environment or the command line.

        Raises:
            KeyError: unknown key
            ValueError: the value does not fit the key
        """
        if key not in Config.keys():
            raise KeyError(key)
        if key == "inverted":
            return parse_bool(value)
        if key == "height":
            return parse_height(value)
        return value

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    @classmethod
    def load(cls, config_dir: Path | None = None) -> Config:
        """Load settings. Without ``config_dir`` the result is cached."""
        global _config_cache

        if config_dir is None and _config_cache is not None:
            return _config_cache

        config = cls(config_dir=config_dir or get_default_config_dir())
        config._read_file()
        config._read_env()

        if config_dir is None:
            _config_cache = config
        return config

    def set(self, key: str, value: Any) -> None:
        """Change a setting and write it to the config file."""
        self.override(key, value)
        self._stored[key] = value
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(json.dumps(self._stored, indent=2))

    def override(self, key: str, value: Any) -> None:
        """Change a setting for this run only."""
        if key not in self.keys():
            raise KeyError(key)
        setattr(self, key, value)

    def _read_file(self) -> None:
        if not self.config_file.exists():
            return
        content = self.config_file.read_text()
        if not content.strip():
            return
        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            logger.warning("Ignoring corrupted config file %s", self.config_file)
            return
        if not isinstance(data, dict):
            logger.warning("Ignoring config file %s: expected a JSON object", self.config_file)
            return

        for key, value in data.items():
            if key not in self.keys():
                logger.debug("unknown config key %r in %s", key, self.config_file)
                continue
            self._stored[key] = value
            setattr(self, key, value)

    def _read_env(self) -> None:
        for key in self.keys():
            env_key = f"TVPICK_{key.upper()}"
            if env_key not in os.environ:
                continue
            try:
                setattr(self, key, self.parse(key, os.environ[env_key]))
            except ValueError as e:
                logger.warning("Ignoring %s: %s", env_key, e)
