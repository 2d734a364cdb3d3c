"""
Configuration Manager - Persist viewer preferences between sessions
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "PATCHVIEW_CONFIG_DIR"
LARGE_FILE_THRESHOLD = 1024 * 1024  # 1MB

LAST_IMPORT_DIRECTORY = "lastImportDirectory"
LAST_ORIGINAL_DIRECTORY = "lastOriginalDirectory"
LAST_REVISED_DIRECTORY = "lastRevisedDirectory"
DIRECTORY_KEYS = (LAST_IMPORT_DIRECTORY, LAST_ORIGINAL_DIRECTORY, LAST_REVISED_DIRECTORY)

SUPPORTED_LANGUAGES = ("en", "zh", "ja")


def resolve_language(language: str | None) -> str:
    """Map a language tag onto a supported UI language (English fallback)"""
    if not language:
        return "en"
    primary = language.replace("_", "-").split("-")[0].lower()
    return primary if primary in SUPPORTED_LANGUAGES else "en"


class ConfigManager:
    """Manage configuration persistence

    One instance is created by the application and handed to whoever needs
    it; nothing reaches it through module state.
    """

    def __init__(self, config_dir: str | Path | None = None):
        self._config_file: Path | None = None

        # 1. explicit argument, 2. environment, 3. ~/.patchview
        config_dir = config_dir or os.environ.get(CONFIG_DIR_ENV)
        if not config_dir:
            try:
                config_dir = Path.home() / ".patchview"
            except RuntimeError as e:
                logger.warning("No home directory: %s", e)

        if config_dir:
            config_path = Path(config_dir)
            try:
                config_path.mkdir(parents=True, exist_ok=True)
                self._config_file = config_path / "config.json"
            except OSError as e:
                logger.warning("Cannot write to %s: %s", config_dir, e)

        # Fallback: temp directory
        if self._config_file is None:
            tmp_dir = Path(tempfile.gettempdir()) / "patchview"
            tmp_dir.mkdir(parents=True, exist_ok=True)
            self._config_file = tmp_dir / "config.json"
            logger.info("Using temporary config path: %s", self._config_file)

        self._config = self._load_config()

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, filling in missing defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file, encoding="utf-8") as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error("Error loading config: %s", e)
            return config

        if not isinstance(stored, dict):
            logger.error("Ignoring config file %s: expected a JSON object", self._config_file)
            return config

        config.update(stored)
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            LAST_IMPORT_DIRECTORY: None,
            LAST_ORIGINAL_DIRECTORY: None,
            LAST_REVISED_DIRECTORY: None,
            "language": resolve_language(os.environ.get("LANG")),
            "assetsDir": None,
            "largeFileThreshold": LARGE_FILE_THRESHOLD,
            "streamChunkSize": 500,
            "server": {"host": "127.0.0.1", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return self._config.copy()

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        # Merge with existing config
        self._config.update(config)
        self._config["language"] = resolve_language(self._config.get("language"))

        # Ensure config directory exists
        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str, default=None):
        """Get specific config value"""
        value = self._config.get(key)
        return default if value is None else value

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)

    def get_directory(self, key: str) -> Path | None:
        """Return a remembered directory if it still exists"""
        path = self._config.get(key)
        if path and Path(path).is_dir():
            return Path(path)
        return None

    def remember_directory(self, key: str, path: str | Path):
        """Remember the directory of `path` (or `path` itself if a directory)"""
        path = Path(path)
        if not path.exists():
            return
        directory = path if path.is_dir() else path.parent
        self.set(key, str(directory.resolve()))
