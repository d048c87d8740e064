"""Configuration management for r2import.

Saved paths live in ``~/.config/r2import/config.json`` so that later runs can
find the r2modman and Valheim directories without any options.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "R2IMPORT_CONFIG_DIR"
CONFIG_FILE_NAME = "config.json"


class Config:
    """Persistent user configuration."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize configuration.

        Args:
            config_dir: Directory holding the config file. Defaults to
                ``$R2IMPORT_CONFIG_DIR`` or ``~/.config/r2import``.
        """
        self._config_dir = config_dir
        self._data: Optional[dict] = None

    @property
    def config_dir(self) -> Path:
        if self._config_dir is not None:
            return self._config_dir
        env_dir = os.environ.get(CONFIG_DIR_ENV)
        if env_dir:
            return Path(env_dir)
        return Path.home() / ".config" / "r2import"

    def get_config_path(self) -> Path:
        """Get the path of the config file."""
        return self.config_dir / CONFIG_FILE_NAME

    def load(self) -> dict:
        """Load the config file.

        A missing or unreadable file yields an empty configuration.

        Returns:
            Dictionary with the stored settings
        """
        if self._data is not None:
            return self._data

        config_path = self.get_config_path()
        data: dict = {}
        if config_path.is_file():
            try:
                with open(config_path, encoding="utf-8") as f:
                    loaded = json.load(f)
                if isinstance(loaded, dict):
                    data = loaded
                else:
                    logger.warning(f"Ignoring malformed config file {config_path}")
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Failed to read config file {config_path}: {e}")
        self._data = data
        return data

    def save_paths(self, r2modman_path: Path, valheim_path: Path) -> Path:
        """Save resolved r2modman and Valheim paths.

        Args:
            r2modman_path: r2modman data directory
            valheim_path: Valheim installation directory

        Returns:
            Path of the written config file
        """
        data = dict(self.load())
        data["r2modman_path"] = str(Path(r2modman_path).resolve())
        data["valheim_path"] = str(Path(valheim_path).resolve())

        config_path = self.get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        self._data = data
        logger.debug(f"Saved paths to {config_path}")
        return config_path

    @property
    def r2modman_path(self) -> Optional[str]:
        """Saved r2modman path, if any."""
        return self.load().get("r2modman_path") or None

    @property
    def valheim_path(self) -> Optional[str]:
        """Saved Valheim path, if any."""
        return self.load().get("valheim_path") or None


config = Config()
