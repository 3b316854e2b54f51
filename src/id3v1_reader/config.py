"""Configuration management for ID3v1 Reader.

Handles saving and loading user preferences for tag extraction and
logging.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Dict, Any, Optional

import tomli_w


LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.id3v1 on all platforms)
    """
    return Path.home() / ".id3v1"


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / "config.toml"


class Config:
    """Configuration manager for application settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "extraction": {
            # Parse an APEv2 tag found directly before the ID3v1 record
            "parse_ape": True,
            # Report genre codes that are not in the genre table
            "warn_unknown_genre": True,
        },
        "logging": {
            # One of: debug, info, warning, error, critical
            "level": "critical",
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_path: Config file to use instead of ~/.id3v1/config.toml
        """
        self.config_path = Path(config_path) if config_path else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
                # Merge with defaults (in case new keys were added)
                self._merge_config(self.data, loaded_data)
            self._dirty = False
            return True
        except (OSError, tomllib.TOMLDecodeError) as e:
            logging.error(f"Error loading config {self.config_path}: {e}")
            return False

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
            self._dirty = False
            return True
        except OSError as e:
            logging.error(f"Error saving config {self.config_path}: {e}")
            return False

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        """Check if configuration has been modified."""
        return self._dirty

    # Extraction settings
    def get_parse_ape(self) -> bool:
        return self.data["extraction"]["parse_ape"]

    def set_parse_ape(self, enabled: bool) -> None:
        self.data["extraction"]["parse_ape"] = enabled
        self._dirty = True

    def get_warn_unknown_genre(self) -> bool:
        return self.data["extraction"]["warn_unknown_genre"]

    def set_warn_unknown_genre(self, enabled: bool) -> None:
        self.data["extraction"]["warn_unknown_genre"] = enabled
        self._dirty = True

    # Logging settings
    def get_log_level(self) -> str:
        """Get the default log level used by the CLI."""
        return self.data.get("logging", {}).get("level", "critical")

    def set_log_level(self, level: str) -> None:
        """Set the default log level.

        Raises:
            ValueError: If level is not a known logging level name
        """
        if level.lower() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {level}")
        self.data.setdefault("logging", {})["level"] = level.lower()
        self._dirty = True
