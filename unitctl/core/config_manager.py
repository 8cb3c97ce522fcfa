"""Configuration manager for loading and saving library settings."""

import logging
import os
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import yaml

from ..utils.constants import (CONFIG_ENV_VAR, CONFIG_FILE, DEFAULT_NORMALIZE_OUTPUT,
                               DEFAULT_TIMEOUT, SYSTEMCTL_PATH, UNIT_PATHS)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages the settings used to build a ServiceManager."""

    CONFIG_VERSION = "1.0"

    DEFAULT_SETTINGS = {
        "systemctl_path": SYSTEMCTL_PATH,
        "unit_paths": list(UNIT_PATHS),
        "normalize_output": DEFAULT_NORMALIZE_OUTPUT,
        "timeout": DEFAULT_TIMEOUT,
    }

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """Initialize the config manager.

        Args:
            config_file: Path of the YAML config file. Defaults to $UNITCTL_CONFIG,
                then ~/.config/unitctl/config.yaml.
        """
        if config_file is None:
            config_file = os.environ.get(CONFIG_ENV_VAR) or CONFIG_FILE
        self.config_file = Path(config_file)
        self.settings: Dict[str, Any] = {}
        self._ensure_default_settings()

    def load_config(self) -> bool:
        """Load configuration from file.

        Returns:
            True if config loaded successfully, False if defaults are in use
        """
        if not self.config_file.exists():
            logger.info("Config file not found, using defaults")
            self._load_defaults()
            return False

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            logger.error(f"YAML parsing error: {e}")
            self._load_defaults()
            return False
        except OSError as e:
            logger.error(f"Failed to load config: {e}")
            self._load_defaults()
            return False

        if not data:
            logger.warning("Empty config file, using defaults")
            self._load_defaults()
            return False

        if not self._validate_config(data):
            logger.error("Invalid config file, using defaults")
            self._load_defaults()
            return False

        self.settings = dict(data.get("settings") or {})
        self._ensure_default_settings()
        self._drop_invalid_settings()

        logger.info(f"Loaded config from {self.config_file}")
        return True

    def save_config(self) -> bool:
        """Save configuration to file.

        Returns:
            True if saved successfully, False otherwise
        """
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)

            # Create backup if config exists
            if self.config_file.exists():
                backup_file = self.config_file.with_suffix('.yaml.bak')
                shutil.copy2(self.config_file, backup_file)
                logger.debug(f"Created backup at {backup_file}")

            data = {
                "version": self.CONFIG_VERSION,
                "settings": self.settings
            }

            # Write to temp file first (atomic write)
            temp_file = self.config_file.with_suffix('.yaml.tmp')
            with open(temp_file, 'w') as f:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False)

            temp_file.replace(self.config_file)

            logger.info(f"Saved config to {self.config_file}")
            return True

        except OSError as e:
            logger.error(f"Failed to save config: {e}")
            return False

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a setting value.

        Args:
            key: Setting key
            default: Default value if key not found

        Returns:
            Setting value or default
        """
        return self.settings.get(key, default)

    def set_setting(self, key: str, value: Any):
        """Set a setting value and save the config file.

        Args:
            key: Setting key
            value: Setting value
        """
        self.settings[key] = value
        self.save_config()

    @property
    def systemctl_path(self) -> str:
        return self.settings["systemctl_path"]

    @property
    def unit_paths(self) -> List[str]:
        return list(self.settings["unit_paths"])

    @property
    def normalize_output(self) -> bool:
        return self.settings["normalize_output"]

    @property
    def timeout(self) -> Optional[float]:
        return self.settings["timeout"]

    def _validate_config(self, data: dict) -> bool:
        """Validate configuration data structure.

        Args:
            data: Configuration dictionary

        Returns:
            True if valid, False otherwise
        """
        if not isinstance(data, dict):
            logger.error("Config must be a dictionary")
            return False

        if "version" not in data:
            logger.warning("Config missing version, assuming valid")

        if "settings" in data and data["settings"] is not None and not isinstance(data["settings"], dict):
            logger.error("Settings must be a dictionary")
            return False

        return True

    def _drop_invalid_settings(self):
        """Replace settings of the wrong type with their defaults."""
        checks = {
            "systemctl_path": lambda v: isinstance(v, str) and bool(v),
            "unit_paths": lambda v: isinstance(v, list) and all(isinstance(p, str) for p in v),
            "normalize_output": lambda v: isinstance(v, bool),
            "timeout": lambda v: v is None or (isinstance(v, (int, float)) and not isinstance(v, bool) and v > 0),
        }

        for key, check in checks.items():
            if not check(self.settings[key]):
                logger.warning(f"Invalid value for {key}: {self.settings[key]!r}, using default")
                self.settings[key] = self._default(key)

    def _load_defaults(self):
        """Load default configuration."""
        self.settings = {}
        self._ensure_default_settings()
        logger.info("Loaded default configuration")

    def _ensure_default_settings(self):
        """Ensure all default settings exist."""
        for key in self.DEFAULT_SETTINGS:
            if key not in self.settings:
                self.settings[key] = self._default(key)

    def _default(self, key: str) -> Any:
        value = self.DEFAULT_SETTINGS[key]
        return list(value) if isinstance(value, list) else value
